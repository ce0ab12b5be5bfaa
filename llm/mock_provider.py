"""
[测试样例] 一个模拟的 LLM 供应商
不进行任何实际 API 调用，用于离线运行与测试。
"""
import logging
from llm.provider_abc import LLMProvider, register_provider
from config import GlobalConfig

logger = logging.getLogger(__name__)


@register_provider("mock")
class MockProvider(LLMProvider):
    """
    模拟的 Provider，根据提示词返回固定格式的摘要。
    """

    def __init__(self, global_config: GlobalConfig):
        self.global_config = global_config
        logger.info("✅ MockProvider 已初始化 (无需 API Key)")

    def summarize_commits(self, prompt: str) -> str:
        subjects = [
            line.strip()[2:]
            for line in prompt.split("Commit messages:", 1)[-1].splitlines()
            if line.strip().startswith("- ")
        ]
        return f"- [Mock] {len(subjects)} commits summarized."
