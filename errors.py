# errors.py
"""
[V5.0] 统一异常定义
- ExternalToolFailure: git 不存在 / 超时 / 返回非零
- DataCollectionFailure: 日志或变更集采集失败 (致命)
- SummarizationFailure: LLM 摘要失败 (可降级)
"""
from typing import List, Optional


class GitSummaryError(Exception):
    """所有业务异常的基类"""


class ExternalToolFailure(GitSummaryError):
    """外部工具 (git) 执行失败，stderr 原样保留"""

    def __init__(
        self,
        stderr: str,
        args: Optional[List[str]] = None,
        returncode: Optional[int] = None,
    ):
        self.stderr = stderr
        self.args_list = list(args or [])
        self.returncode = returncode
        super().__init__(f"Git command failed: {stderr}")


class DataCollectionFailure(GitSummaryError):
    """提交记录或变更统计采集失败"""


class SummarizationFailure(GitSummaryError):
    """LLM 供应商调用失败 (网络错误 / 非成功响应 / 空回复)"""
