"""
[V5.0] LLMProvider 针对 Anthropic Claude 的具体实现 (默认供应商)。
"""
import logging

import anthropic

from llm.provider_abc import LLMProvider, register_provider
from config import GlobalConfig
from errors import SummarizationFailure

logger = logging.getLogger(__name__)


@register_provider("anthropic")
class AnthropicProvider(LLMProvider):
    """
    Anthropic Messages API 策略实现。
    """

    def __init__(self, global_config: GlobalConfig):
        self.global_config = global_config
        if not self.global_config.ANTHROPIC_API_KEY:
            logger.error("❌ ANTHROPIC_API_KEY 未设置。请检查您的 .env 文件。")
            raise ValueError("ANTHROPIC_API_KEY 未设置。")

        self.client = anthropic.Anthropic(api_key=self.global_config.ANTHROPIC_API_KEY)
        self.default_model = self.global_config.DEFAULT_MODEL_ANTHROPIC
        logger.info(f"✅ AnthropicProvider 初始化成功 (模型: {self.default_model})")

    def summarize_commits(self, prompt: str) -> str:
        try:
            response = self.client.messages.create(
                model=self.default_model,
                max_tokens=self.global_config.SUMMARY_MAX_TOKENS,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            raise SummarizationFailure(
                f"Anthropic API error ({e.status_code}): {e.message}"
            ) from e
        except anthropic.APIError as e:
            raise SummarizationFailure(
                f"Failed to send request to Anthropic API: {e}"
            ) from e

        texts = [block.text for block in response.content if block.type == "text"]
        if not texts:
            raise SummarizationFailure("No content in response")
        return texts[0]
