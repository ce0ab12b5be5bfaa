# orchestrator.py
"""
[V5.0] 业务逻辑编排器
采集 -> 聚合 -> AI 摘要 (可降级) -> 渲染
"""
import logging
from typing import Optional

from context import RunContext
from errors import DataCollectionFailure
from models import SummaryResult

from ai_summarizer import AIService, unavailable_placeholder
from data_sources.local_git import LocalGitDataSource
from formatters.factory import get_formatter

logger = logging.getLogger(__name__)


class SummaryOrchestrator:
    """
    负责执行摘要生成的核心业务逻辑。
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.global_config = context.global_config
        self.data_source = LocalGitDataSource(context)
        self.formatter = get_formatter(context.output_format)

    def collect(self) -> SummaryResult:
        if not self.data_source.validate():
            raise DataCollectionFailure(
                f"Not a git repository: {self.context.repo_path}"
            )
        return self.data_source.collect_summary()

    def synopsis(self, result: SummaryResult) -> str:
        if self.context.no_llm:
            return self.global_config.LLM_SKIPPED_PLACEHOLDER

        try:
            ai_service = AIService(self.context)
        except (ValueError, ImportError, OSError) as e:
            logger.error(f"❌ AI 服务初始化失败: {e}")
            logger.error("   将以占位摘要继续...")
            return unavailable_placeholder(self.global_config, str(e))

        logger.info("🤖 正在请求 AI 摘要...")
        return ai_service.get_synopsis_or_placeholder(result)

    def run(self) -> Optional[str]:
        """
        执行核心业务流程，返回渲染后的文本。
        没有匹配的提交时返回 None。
        """
        result = self.collect()
        if not result.commits:
            logger.warning("⚠️ 未获取到提交记录")
            return None

        summary = self.synopsis(result)
        return self.formatter.format(
            result, summary, self.context.verbose, self.context.quiet
        )
