from models import SummaryResult
from utils import format_timestamp
from .base import Formatter, register_formatter


@register_formatter("markdown")
class MarkdownFormatter(Formatter):
    def format(
        self, data: SummaryResult, summary: str, verbose: bool, quiet: bool
    ) -> str:
        if quiet:
            return summary + "\n"

        lines = [
            f"# Git Summary: {data.date_range} ({data.branch})",
            "",
            f"**{data.total_commits} commits** | "
            f"**+{data.total_additions} -{data.total_deletions}** lines",
            "",
            "## Summary",
            "",
            summary,
            "",
        ]

        if data.area_stats:
            lines.extend(
                [
                    "## By Area",
                    "",
                    "| Path | Commits | Lines |",
                    "|------|---------|-------|",
                ]
            )
            for area in data.area_stats:
                lines.append(
                    f"| {area.path} | {area.commit_count} | +{area.additions}/-{area.deletions} |"
                )
            lines.append("")

        lines.extend(["## Commits", ""])
        for commit in data.commits:
            date = format_timestamp(commit.timestamp)
            if verbose:
                lines.append(f"- `{date}` `{commit.short_hash}` {commit.message}")
                for change in commit.files_changed:
                    lines.append(
                        f"  - `{change.path}` (+{change.additions}/-{change.deletions})"
                    )
            else:
                lines.append(f"- `{date}` {commit.message}")

        return "\n".join(lines) + "\n"
