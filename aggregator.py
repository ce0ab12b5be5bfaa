# aggregator.py
"""
[V5.0] 按目录 (Area) 聚合提交统计
- 行数按文件变更逐条累加
- 提交数按 (提交, 目录) 去重后计数
"""
import logging
from typing import Dict, Iterable, List, Set, Tuple

from config import GlobalConfig
from models import AreaStats, Commit

logger = logging.getLogger(__name__)


def extract_area(path: str) -> str:
    """
    提取文件路径的 "Area" (顶层目录)。
    "src/lib/x.rs" -> "src/"，根目录下的文件 -> "(root)"
    """
    head, sep, _ = path.partition("/")
    if not sep:
        return GlobalConfig.ROOT_AREA
    return f"{head}/"


def aggregate_areas(
    commits: Iterable[Commit],
) -> Tuple[List[AreaStats], int, int]:
    """
    返回 (area_stats, total_additions, total_deletions)。
    area_stats 按 commit_count 降序，相同计数按目录名升序。
    """
    # area -> [commit_count, additions, deletions]
    area_map: Dict[str, List[int]] = {}
    total_additions = 0
    total_deletions = 0

    for commit in commits:
        commit_areas: Set[str] = set()

        for change in commit.files_changed:
            area = extract_area(change.path)
            commit_areas.add(area)

            entry = area_map.setdefault(area, [0, 0, 0])
            entry[1] += change.additions
            entry[2] += change.deletions

            total_additions += change.additions
            total_deletions += change.deletions

        # 同一提交在同一目录下只计一次
        for area in commit_areas:
            area_map[area][0] += 1

    area_stats = [
        AreaStats(
            path=path,
            commit_count=commit_count,
            additions=additions,
            deletions=deletions,
        )
        for path, (commit_count, additions, deletions) in area_map.items()
    ]
    area_stats.sort(key=lambda a: (-a.commit_count, a.path))
    logger.info(
        f"聚合完成: {len(area_stats)} 个目录, +{total_additions} -{total_deletions}"
    )
    return area_stats, total_additions, total_deletions
