"""
[V3.5] LLMProvider 针对 DeepSeek 的具体实现。
[V4.1] 使用 @register_provider 进行自动注册。
"""
import logging

from openai import OpenAI, OpenAIError

from llm.provider_abc import LLMProvider, register_provider
from config import GlobalConfig
from errors import SummarizationFailure

logger = logging.getLogger(__name__)


def chat_completion(client: OpenAI, model: str, prompt: str, **kwargs) -> str:
    """OpenAI 兼容接口的单轮调用，DeepSeek 与 Ollama 共用"""
    try:
        response = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
    except OpenAIError as e:
        raise SummarizationFailure(f"{model} 请求失败: {e}") from e

    if response.choices and response.choices[0].message.content:
        return response.choices[0].message.content.strip()
    raise SummarizationFailure(f"未从 {model} 收到内容")


@register_provider("deepseek")
class DeepSeekProvider(LLMProvider):
    """
    DeepSeek 策略实现 (OpenAI 兼容)。
    """

    def __init__(self, global_config: GlobalConfig):
        self.global_config = global_config
        if not self.global_config.DEEPSEEK_API_KEY:
            logger.error("❌ DEEPSEEK_API_KEY 未设置。请检查您的 .env 文件。")
            raise ValueError("DEEPSEEK_API_KEY 未设置。")

        self.client = OpenAI(
            api_key=self.global_config.DEEPSEEK_API_KEY,
            base_url=self.global_config.DEEPSEEK_BASE_URL,
        )
        self.default_model = self.global_config.DEFAULT_MODEL_DEEPSEEK
        logger.info("✅ DeepSeekProvider 初始化成功")

    def summarize_commits(self, prompt: str) -> str:
        return chat_completion(
            self.client,
            self.default_model,
            prompt,
            max_tokens=self.global_config.SUMMARY_MAX_TOKENS,
        )
