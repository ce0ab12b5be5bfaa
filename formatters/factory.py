import logging
from typing import List

from .base import FORMATTER_REGISTRY, Formatter

# 导入即注册
from . import pretty, markdown_formatter, json_formatter, html_formatter  # noqa: F401

logger = logging.getLogger(__name__)


def available_formats() -> List[str]:
    return list(FORMATTER_REGISTRY.keys())


def get_formatter(format_name: str) -> Formatter:
    if format_name not in FORMATTER_REGISTRY:
        raise ValueError(
            f"未知的输出格式: {format_name} (可用: {', '.join(available_formats())})"
        )
    logger.info(f"🎨 [Factory] 使用渲染器: {format_name}")
    return FORMATTER_REGISTRY[format_name]()
