"""
[V5.0] 输出格式的抽象基类与注册表。
与 llm/provider_abc.py 相同的 Registry Pattern。
"""
from abc import ABC, abstractmethod
from typing import Dict, Type

from models import SummaryResult

FORMATTER_REGISTRY: Dict[str, Type["Formatter"]] = {}


def register_formatter(format_name: str):
    """类装饰器：将渲染器注册到全局注册表中。"""

    def decorator(cls):
        if format_name in FORMATTER_REGISTRY:
            raise ValueError(
                f"Formatter '{format_name}' 已经被注册过 ({FORMATTER_REGISTRY[format_name].__name__})"
            )
        FORMATTER_REGISTRY[format_name] = cls
        return cls

    return decorator


class Formatter(ABC):
    """
    渲染器接口：只读 SummaryResult，返回可直接输出的字符串。
    quiet 模式下只输出摘要。
    """

    @abstractmethod
    def format(
        self, data: SummaryResult, summary: str, verbose: bool, quiet: bool
    ) -> str:
        pass
