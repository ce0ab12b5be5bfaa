# context.py
"""
[V5.0] 运行时配置的数据模型
"""
from dataclasses import dataclass
from typing import Optional
from config import GlobalConfig


@dataclass
class RunContext:
    """
    封装一次运行所需的所有配置和状态。
    这是从 CLI 传递到 Orchestrator 的唯一对象。
    """

    # --- 核心路径 ---
    repo_path: str

    # --- 范围参数 ---
    branch: str
    since: Optional[str]
    until: Optional[str]

    # --- 输出参数 ---
    output_format: str
    verbose: bool
    quiet: bool

    # --- AI 参数 ---
    llm_id: str
    no_llm: bool

    # --- 全局配置 ---
    global_config: GlobalConfig
