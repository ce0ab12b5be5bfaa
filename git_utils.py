# git_utils.py
import subprocess
import logging
from typing import Optional, List

from config import GlobalConfig
from errors import ExternalToolFailure
from models import Commit, FileChange

logger = logging.getLogger(__name__)


def run_git_command(
    args: List[str],
    repo_path: str,
    context: str = "执行Git命令",
    timeout: Optional[int] = None,
) -> str:
    """
    (V5.0) 统一的Git命令执行函数
    - 每次调用只启动一个 git 子进程
    - 失败时抛出 ExternalToolFailure，不重试
    """
    cmd = ["git", *args]
    logger.info(f"在 {repo_path} 中执行命令: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout or GlobalConfig.GIT_COMMAND_TIMEOUT,
            cwd=repo_path,
        )
    except subprocess.TimeoutExpired:
        logger.error(f"{context}超时")
        raise ExternalToolFailure(f"{context} timed out", args=cmd)
    except OSError as e:
        # git 不存在或工作目录不可用
        logger.error(f"{context}出错: {e}")
        raise ExternalToolFailure(str(e), args=cmd)

    if result.returncode != 0:
        stderr = result.stderr.strip()
        logger.error(f"{context}失败 ({' '.join(cmd)}): {stderr}")
        raise ExternalToolFailure(stderr, args=cmd, returncode=result.returncode)
    logger.info(f"{context}成功，输出 {len(result.stdout.splitlines())} 行")
    return result.stdout


def is_git_repository(repo_path: str) -> bool:
    """检查指定路径是否为Git仓库"""
    try:
        output = run_git_command(
            ["rev-parse", "--is-inside-work-tree"], repo_path, "检查Git仓库"
        )
    except ExternalToolFailure:
        return False
    return output.strip() == "true"


def get_current_branch(repo_path: str) -> str:
    """解析 HEAD 对应的分支名"""
    output = run_git_command(
        ["rev-parse", "--abbrev-ref", "HEAD"], repo_path, "获取当前分支"
    )
    return output.strip()


def get_git_log(
    repo_path: str,
    branch: str,
    since: Optional[str] = None,
    until: Optional[str] = None,
) -> str:
    """获取Git提交历史 (每行一个提交)"""
    args = ["log", GlobalConfig.GIT_LOG_FORMAT]
    if since:
        args.append(f"--since={since}")
    if until:
        args.append(f"--until={until}")
    # 分支名只作为修订版本解析，不会被当成选项或路径
    args += ["--end-of-options", branch, "--"]
    return run_git_command(args, repo_path, "获取Git提交历史")


def parse_single_commit(line: str) -> Optional[Commit]:
    """
    解析单行提交记录: hash|short_hash|subject|timestamp
    左侧最多切两次取哈希，时间戳从右侧切出，标题中的 '|' 保持原样。
    """
    delimiter = GlobalConfig.GIT_LOG_DELIMITER
    parts = line.split(delimiter, 2)
    if len(parts) < 3 or delimiter not in parts[2]:
        logger.debug(f"跳过格式异常的提交行: {line!r}")
        return None
    message, _, timestamp = parts[2].rpartition(delimiter)
    return Commit(
        hash=parts[0],
        short_hash=parts[1],
        message=message,
        timestamp=timestamp,
    )


def parse_git_log(log_output: str) -> List[Commit]:
    """解析Git日志输出，保持原有顺序"""
    commits = []
    if not log_output or not log_output.strip():
        logger.warning("Git日志输出为空")
        return commits
    for line in log_output.splitlines():
        if not line:
            continue
        commit = parse_single_commit(line)
        if commit:
            commits.append(commit)
    logger.info(f"成功解析 {len(commits)} 个提交")
    return commits


def _parse_count(value: str) -> int:
    # 二进制文件在 numstat 中显示为 "-"
    return int(value) if value.isdecimal() else 0


def parse_numstat(output: str) -> List[FileChange]:
    """解析单个提交的 numstat 输出: additions<TAB>deletions<TAB>path"""
    changes = []
    for line in output.splitlines():
        if not line:
            continue
        parts = line.split("\t", 2)
        if len(parts) < 3:
            logger.debug(f"跳过格式异常的统计行: {line!r}")
            continue
        changes.append(
            FileChange(
                path=parts[2],
                additions=_parse_count(parts[0].strip()),
                deletions=_parse_count(parts[1].strip()),
            )
        )
    return changes


def get_commit_file_changes(repo_path: str, commit_hash: str) -> List[FileChange]:
    """获取单个commit的文件变更统计"""
    output = run_git_command(
        [
            *GlobalConfig.GIT_RAW_PATH_ARGS,
            "show",
            commit_hash,
            *GlobalConfig.GIT_NUMSTAT_ARGS,
        ],
        repo_path,
        f"获取 {commit_hash[:12]} 的变更统计",
    )
    return parse_numstat(output)
