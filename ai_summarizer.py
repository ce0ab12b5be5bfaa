import logging
import os
import importlib
from typing import Optional

from config import GlobalConfig
from context import RunContext
from errors import SummarizationFailure
from models import SummaryResult
from utils import strip_code_fence

from llm.provider_abc import LLMProvider, PROVIDER_REGISTRY

logger = logging.getLogger(__name__)

PROMPT_FILENAME = "summary.txt"


# --- (V4.1) 动态加载器 ---
def load_providers_dynamically(script_base_path: str):
    """
    (V4.1) 扫描 llm/ 目录下的所有 .py 文件并导入它们。
    这将触发 @register_provider 装饰器，将类注册到 PROVIDER_REGISTRY 中。
    """
    llm_dir = os.path.join(script_base_path, "llm")
    if not os.path.exists(llm_dir):
        logger.warning(f"⚠️ 未找到 llm 目录: {llm_dir}")
        return

    for filename in sorted(os.listdir(llm_dir)):
        if not filename.endswith(".py") or filename in (
            "__init__.py",
            "provider_abc.py",
        ):
            continue
        module_name = f"llm.{filename[:-3]}"
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            # 缺少某个供应商的 SDK 不影响其它供应商
            logger.warning(f"⚠️ 动态加载模块 {module_name} 失败: {e}")


def get_llm_provider(provider_id: str, global_config: GlobalConfig) -> LLMProvider:
    """
    (V4.1) 工厂函数：基于 Registry Pattern 实现。
    """
    logger.info(f"ℹ️ 正在初始化 LLM 供应商: {provider_id}")

    load_providers_dynamically(global_config.SCRIPT_BASE_PATH)

    if provider_id not in PROVIDER_REGISTRY:
        logger.error(f"❌ 未知的 LLM 供应商: '{provider_id}'")
        logger.error(f"   可用供应商: {sorted(PROVIDER_REGISTRY.keys())}")
        raise ValueError(f"未知的 LLM 供应商: {provider_id}")

    if not global_config.is_provider_configured(provider_id):
        logger.error(f"❌ 供应商 '{provider_id}' 未配置 API Key。")
        raise ValueError(
            f"供应商 '{provider_id}' 未配置。 "
            f"请在您的 .env 文件中设置相应的 API 密钥。"
        )

    provider_class = PROVIDER_REGISTRY[provider_id]
    return provider_class(global_config)


def load_prompt_template(global_config: GlobalConfig) -> str:
    prompt_path = os.path.join(
        global_config.SCRIPT_BASE_PATH, global_config.PROMPTS_DIR_NAME, PROMPT_FILENAME
    )
    with open(prompt_path, "r", encoding="utf-8") as f:
        return f.read()


def build_prompt(result: SummaryResult, template: str) -> str:
    """
    按固定顺序组装提示词:
    分支、时间范围、提交总数、目录统计、提交标题。
    """
    area_lines = "\n".join(
        f"  {area.path} - {area.commit_count} commits, +{area.additions}/-{area.deletions} lines"
        for area in result.area_stats
    )
    commit_lines = "\n".join(f"  - {commit.message}" for commit in result.commits)
    return template.format(
        branch=result.branch,
        date_range=result.date_range,
        total_commits=result.total_commits,
        area_lines=area_lines,
        commit_lines=commit_lines,
    )


class AIService:
    """
    封装对 LLM 的调用。
    - 由 RunContext 初始化
    - 供应商配置错误在构造时以 ValueError 抛出
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.global_config = context.global_config
        self.provider: LLMProvider = get_llm_provider(
            context.llm_id, self.global_config
        )
        self.prompt_template = load_prompt_template(self.global_config)
        logger.info(
            f"✅ 🤖 AI 服务已成功初始化 (Provider: {self.provider.__class__.__name__})"
        )

    def get_synopsis(self, result: SummaryResult) -> str:
        """请求摘要，失败时抛出 SummarizationFailure"""
        prompt = build_prompt(result, self.prompt_template)
        synopsis = self.provider.summarize_commits(prompt)
        cleaned = strip_code_fence(synopsis)
        if not cleaned:
            raise SummarizationFailure("No content in response")
        return cleaned

    def get_synopsis_or_placeholder(self, result: SummaryResult) -> str:
        try:
            return self.get_synopsis(result)
        except SummarizationFailure as e:
            logger.error(f"❌ AI 摘要失败: {e}")
            return unavailable_placeholder(self.global_config, str(e))


def unavailable_placeholder(global_config: GlobalConfig, reason: str) -> str:
    return global_config.LLM_UNAVAILABLE_PLACEHOLDER.format(reason=reason)
