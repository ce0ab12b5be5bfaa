import logging

from openai import OpenAI

from llm.provider_abc import LLMProvider, register_provider
from llm.deepseek_provider import chat_completion
from config import GlobalConfig

logger = logging.getLogger(__name__)


@register_provider("ollama")
class OllamaProvider(LLMProvider):
    """
    [V4.7] Ollama 本地大模型策略实现。
    通过 OpenAI 兼容接口连接本地 Ollama 服务。
    """

    def __init__(self, global_config: GlobalConfig):
        self.global_config = global_config
        self.base_url = global_config.OLLAMA_BASE_URL
        self.model_name = global_config.DEFAULT_MODEL_OLLAMA

        # Ollama 不需要真实 Key，但库要求必填
        self.client = OpenAI(base_url=self.base_url, api_key="ollama")
        logger.info(
            f"✅ OllamaProvider 初始化成功 (模型: {self.model_name}, 地址: {self.base_url})"
        )

    def summarize_commits(self, prompt: str) -> str:
        return chat_completion(self.client, self.model_name, prompt, temperature=0.7)
