# config.py
"""
[V5.0] 全局配置
- 从 .env 读取 API 密钥与运行参数
- Git 命令格式、并发与超时设置
"""
import os
from dotenv import load_dotenv


# --- 脚本基础路径 ---
SCRIPT_BASE_PATH = os.path.abspath(os.path.dirname(__file__))
env_path = os.path.join(SCRIPT_BASE_PATH, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
else:
    load_dotenv()


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class GlobalConfig:
    """
    (V5.0) git-summary 的全局应用配置。
    """

    # --- 路径配置 ---
    SCRIPT_BASE_PATH: str = SCRIPT_BASE_PATH
    PROMPTS_DIR_NAME: str = "prompts"
    TEMPLATES_DIR_NAME: str = "templates"

    # --- Git 命令格式 ---
    # 字段顺序: 完整哈希|短哈希|标题|作者时间 (ISO-8601)
    GIT_LOG_FORMAT: str = "--format=%H|%h|%s|%aI"
    GIT_LOG_DELIMITER: str = "|"
    GIT_NUMSTAT_ARGS: list[str] = ["--numstat", "--format="]
    # 非 ASCII 路径按原样输出，不做 C 风格转义
    GIT_RAW_PATH_ARGS: list[str] = ["-c", "core.quotePath=false"]

    # --- 采集参数 ---
    CURRENT_BRANCH: str = "HEAD"
    ROOT_AREA: str = "(root)"
    GIT_COMMAND_TIMEOUT: int = _int_env("GIT_COMMAND_TIMEOUT", 30)
    GIT_MAX_WORKERS: int = _int_env("GIT_MAX_WORKERS", 4)

    # --- 日志 ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # =================================================================
    # --- AI 供应商配置 ---
    # =================================================================

    # 1. 供应商 API 密钥
    ANTHROPIC_API_KEY: str = os.getenv("ANTHROPIC_API_KEY", "")
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    DEEPSEEK_API_KEY: str = os.getenv("DEEPSEEK_API_KEY", "")

    # 2. 供应商特定配置
    DEEPSEEK_BASE_URL: str = "https://api.deepseek.com"
    OLLAMA_BASE_URL: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434/v1")

    # 3. 应用程序默认值
    DEFAULT_LLM: str = os.getenv("DEFAULT_LLM", "anthropic").lower()
    SUMMARY_MAX_TOKENS: int = _int_env("SUMMARY_MAX_TOKENS", 1024)

    # 4. 供应商的默认模型
    DEFAULT_MODEL_ANTHROPIC: str = "claude-sonnet-4-20250514"
    DEFAULT_MODEL_GEMINI: str = "gemini-2.5-flash"
    DEFAULT_MODEL_DEEPSEEK: str = "deepseek-chat"
    DEFAULT_MODEL_OLLAMA: str = os.getenv("OLLAMA_MODEL", "qwen2.5:7b")

    # 5. 摘要占位文本
    LLM_SKIPPED_PLACEHOLDER: str = "(LLM summary skipped)"
    LLM_UNAVAILABLE_PLACEHOLDER: str = "(summary unavailable: {reason})"

    def is_provider_configured(self, provider: str) -> bool:
        """
        检查特定供应商是否已在环境中设置其 API 密钥。
        mock 与 ollama 不需要密钥。
        """
        if provider in ("mock", "ollama"):
            return True
        if provider == "anthropic":
            return bool(self.ANTHROPIC_API_KEY)
        if provider == "gemini":
            return bool(self.GEMINI_API_KEY)
        if provider == "deepseek":
            return bool(self.DEEPSEEK_API_KEY)
        return False
