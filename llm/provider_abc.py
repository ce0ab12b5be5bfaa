"""
[V3.5] 所有 LLM 供应商的抽象基类 (ABC)。
[V4.1] 新增 Registry Pattern 支持，允许动态注册供应商。
[V5.0] 接口收敛为单一的 summarize_commits。
"""
from abc import ABC, abstractmethod
from typing import Type, Dict

# 全局注册表，存储 "provider_id" -> Provider Class 的映射
PROVIDER_REGISTRY: Dict[str, Type["LLMProvider"]] = {}


def register_provider(provider_id: str):
    """
    类装饰器：用于将具体的 Provider 实现类注册到全局注册表中。

    使用示例:
        @register_provider("anthropic")
        class AnthropicProvider(LLMProvider):
            ...
    """

    def decorator(cls):
        if provider_id in PROVIDER_REGISTRY:
            raise ValueError(
                f"Provider id '{provider_id}' 已经被注册过 ({PROVIDER_REGISTRY[provider_id].__name__})"
            )
        PROVIDER_REGISTRY[provider_id] = cls
        return cls

    return decorator


class LLMProvider(ABC):
    """
    LLM 供应商的抽象接口。
    """

    @abstractmethod
    def summarize_commits(self, prompt: str) -> str:
        """
        发送一次请求并返回摘要文本。
        网络错误、非成功响应或空回复时抛出 SummarizationFailure。
        """
        pass
