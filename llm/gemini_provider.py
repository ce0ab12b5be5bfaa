"""
[V3.5] LLMProvider 针对 Google Gemini 的具体实现。
[V4.1] 使用 @register_provider 进行自动注册。
"""
import logging

import httpx
from google import genai
from google.genai.errors import APIError

from llm.provider_abc import LLMProvider, register_provider
from config import GlobalConfig
from errors import SummarizationFailure

logger = logging.getLogger(__name__)


@register_provider("gemini")
class GeminiProvider(LLMProvider):
    """
    Gemini 策略实现。
    """

    def __init__(self, global_config: GlobalConfig):
        self.global_config = global_config
        if not self.global_config.GEMINI_API_KEY:
            logger.error("❌ GEMINI_API_KEY 未设置。请检查您的 .env 文件。")
            raise ValueError("GEMINI_API_KEY 未设置。")

        self.client = genai.Client(api_key=self.global_config.GEMINI_API_KEY)
        self.default_model = self.global_config.DEFAULT_MODEL_GEMINI
        logger.info("✅ GeminiProvider (genai.Client 模式) 初始化成功")

    def summarize_commits(self, prompt: str) -> str:
        try:
            response = self.client.models.generate_content(
                model=f"models/{self.default_model}", contents=prompt
            )
        except APIError as e:
            raise SummarizationFailure(f"Gemini API error ({e.code}): {e.message}") from e
        except httpx.HTTPError as e:
            # 连接失败、超时等传输层错误不会包装成 APIError
            raise SummarizationFailure(f"Failed to send request to Gemini API: {e}") from e

        if not response or not response.text:
            raise SummarizationFailure("API 调用成功，但回复内容为空")
        return response.text
