import logging
import sys


# stdout 留给渲染结果，日志统一写到 stderr
def setup_logging(level: str = "WARNING"):
    """配置全局日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def format_timestamp(iso: str) -> str:
    """
    将 ISO-8601 时间戳缩短为易读格式。
    2025-01-27T10:30:45-05:00 -> 2025-01-27 10:30
    """
    date, sep, time = iso.partition("T")
    if not sep:
        return iso
    return f"{date} {time[:5]}"


def strip_code_fence(text: str) -> str:
    """去除 LLM 回复外层的 ```markdown ... ``` 包裹"""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        first_newline = cleaned.find("\n")
        cleaned = cleaned[first_newline + 1 :] if first_newline != -1 else ""
        if cleaned.rstrip().endswith("```"):
            cleaned = cleaned.rstrip()[:-3]
    return cleaned.strip()
