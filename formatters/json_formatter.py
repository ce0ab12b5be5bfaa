import json

from models import SummaryResult
from .base import Formatter, register_formatter


@register_formatter("json")
class JsonFormatter(Formatter):
    """机器可读输出，commits 仅在 verbose 时包含"""

    def format(
        self, data: SummaryResult, summary: str, verbose: bool, quiet: bool
    ) -> str:
        if quiet:
            return json.dumps({"summary": summary}, indent=2, ensure_ascii=False)

        full = data.to_dict()
        output = {
            "branch": data.branch,
            "date_range": data.date_range,
            "total_commits": data.total_commits,
            "total_additions": data.total_additions,
            "total_deletions": data.total_deletions,
            "summary": summary,
            "area_stats": full["area_stats"],
        }
        if verbose:
            output["commits"] = full["commits"]
        return json.dumps(output, indent=2, ensure_ascii=False)
