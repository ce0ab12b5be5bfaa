import os
import sys
from typing import Optional

from colorama import Fore, Style, just_fix_windows_console

from models import SummaryResult
from utils import format_timestamp
from .base import Formatter, register_formatter


@register_formatter("pretty")
class PrettyFormatter(Formatter):
    """终端彩色输出"""

    def __init__(self, color: Optional[bool] = None):
        if color is None:
            color = sys.stdout.isatty() and "NO_COLOR" not in os.environ
        self.color = color
        if color:
            just_fix_windows_console()

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + Style.RESET_ALL

    def format(
        self, data: SummaryResult, summary: str, verbose: bool, quiet: bool
    ) -> str:
        if quiet:
            return summary + "\n"

        header_line = "═" * 60
        lines = [
            self._paint(header_line, Fore.CYAN),
            self._paint(
                f"  Git Summary: {data.date_range} ({data.branch})",
                Fore.CYAN,
                Style.BRIGHT,
            ),
            self._paint(
                f"  {data.total_commits} commits | "
                f"+{data.total_additions} -{data.total_deletions} lines",
                Fore.CYAN,
            ),
            self._paint(header_line, Fore.CYAN),
            "",
            self._paint("## Summary", Fore.YELLOW, Style.BRIGHT),
            summary,
            "",
        ]

        if data.area_stats:
            lines.append(self._paint("## By Area", Fore.YELLOW, Style.BRIGHT))
            for area in data.area_stats:
                lines.append(
                    f"  {area.path:20} {area.commit_count:3} commits, "
                    f"{area.additions:>+5}/-{area.deletions:<5} lines"
                )
            lines.append("")

        lines.append(self._paint("## Commits", Fore.YELLOW, Style.BRIGHT))
        for commit in data.commits:
            date = self._paint(format_timestamp(commit.timestamp), Style.DIM)
            if verbose:
                short_hash = self._paint(commit.short_hash, Style.DIM)
                lines.append(f"  {date} {short_hash} {commit.message}")
                for change in commit.files_changed:
                    path = self._paint(change.path, Style.DIM)
                    lines.append(
                        f"              {change.additions:>+4}/-{change.deletions:<4} {path}"
                    )
            else:
                lines.append(f"  {date} {commit.message}")

        return "\n".join(lines) + "\n"
