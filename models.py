# models.py
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class FileChange:
    """单个文件的变更统计"""

    path: str
    additions: int
    deletions: int


@dataclass(frozen=True)
class Commit:
    """Git提交数据模型"""

    hash: str
    short_hash: str
    message: str
    timestamp: str
    files_changed: Tuple[FileChange, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AreaStats:
    """按顶层目录聚合的统计"""

    path: str
    commit_count: int
    additions: int
    deletions: int


@dataclass(frozen=True)
class SummaryResult:
    """
    一次采集的最终结果。
    构建后不再修改，是所有渲染器和 AI 摘要的唯一输入。
    """

    branch: str
    date_range: str
    commits: Tuple[Commit, ...]
    area_stats: Tuple[AreaStats, ...]
    total_additions: int
    total_deletions: int

