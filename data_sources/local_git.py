# data_sources/local_git.py
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import List, Optional

from context import RunContext
from errors import DataCollectionFailure, ExternalToolFailure
from models import Commit, SummaryResult
from aggregator import aggregate_areas
import git_utils

logger = logging.getLogger(__name__)


def build_date_range_label(since: Optional[str], until: Optional[str]) -> str:
    """生成时间范围描述"""
    if since and until:
        return f"{since} to {until}"
    if since:
        return f"since {since}"
    if until:
        return f"until {until}"
    return "all time"


class LocalGitDataSource:
    """
    [V5.0] 本地 Git 数据源实现。
    通过调用 git 命令行工具分析本地仓库，只读不写。
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.global_config = context.global_config

    def validate(self) -> bool:
        if not os.path.isdir(self.context.repo_path):
            logger.error(f"❌ 路径不存在: {self.context.repo_path}")
            return False
        if not git_utils.is_git_repository(self.context.repo_path):
            logger.error(f"❌ 指定路径不是 Git 仓库: {self.context.repo_path}")
            return False
        return True

    def resolve_branch(self) -> str:
        """
        将 HEAD 解析为具体分支名。
        解析失败时保留 HEAD，不中断整体流程。
        """
        branch = self.context.branch
        if branch != self.global_config.CURRENT_BRANCH:
            return branch
        try:
            return git_utils.get_current_branch(self.context.repo_path) or branch
        except ExternalToolFailure as e:
            logger.warning(f"⚠️ 无法解析当前分支，使用 {branch}: {e.stderr}")
            return branch

    def get_commits(self) -> List[Commit]:
        """获取提交列表并补全每个提交的文件变更，顺序与 git log 一致"""
        try:
            log_output = git_utils.get_git_log(
                self.context.repo_path,
                self.context.branch,
                self.context.since,
                self.context.until,
            )
        except ExternalToolFailure as e:
            raise DataCollectionFailure(f"获取提交历史失败: {e.stderr}") from e

        commits = git_utils.parse_git_log(log_output)
        if not commits:
            return []

        try:
            return self._attach_file_changes(commits)
        except ExternalToolFailure as e:
            raise DataCollectionFailure(f"获取提交变更统计失败: {e.stderr}") from e

    def _attach_file_changes(self, commits: List[Commit]) -> List[Commit]:
        repo_path = self.context.repo_path
        max_workers = max(1, self.global_config.GIT_MAX_WORKERS)

        if max_workers == 1 or len(commits) == 1:
            return [
                replace(
                    c,
                    files_changed=tuple(
                        git_utils.get_commit_file_changes(repo_path, c.hash)
                    ),
                )
                for c in commits
            ]

        logger.info(f"并发获取 {len(commits)} 个提交的变更统计 (workers={max_workers})")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # futures 按原始下标保存，结果按下标回填
            futures = [
                executor.submit(git_utils.get_commit_file_changes, repo_path, c.hash)
                for c in commits
            ]
            try:
                return [
                    replace(commit, files_changed=tuple(future.result()))
                    for commit, future in zip(commits, futures)
                ]
            except ExternalToolFailure:
                for future in futures:
                    future.cancel()
                raise

    def collect_summary(self) -> SummaryResult:
        """采集提交、聚合统计并组装最终结果"""
        commits = self.get_commits()
        area_stats, total_additions, total_deletions = aggregate_areas(commits)

        result = SummaryResult(
            branch=self.resolve_branch(),
            date_range=build_date_range_label(self.context.since, self.context.until),
            commits=tuple(commits),
            area_stats=tuple(area_stats),
            total_additions=total_additions,
            total_deletions=total_deletions,
        )
        logger.info(
            f"✅ 采集完成: {result.total_commits} 个提交, {len(area_stats)} 个目录"
        )
        return result
