# cli.py
"""
[V5.0] 命令行界面 (Interface) 层
"""
import argparse
import logging
import sys
from typing import List, Optional, Tuple

from config import GlobalConfig
from context import RunContext
from errors import GitSummaryError
from formatters.factory import available_formats
from orchestrator import SummaryOrchestrator
import utils

logger = logging.getLogger(__name__)

NO_COMMITS_MESSAGE = "No commits found for the specified date range."


def setup_parser() -> argparse.ArgumentParser:
    """负责所有 argparse 的定义。"""
    parser = argparse.ArgumentParser(
        prog="git-summary",
        description="Summarize git commits using LLM",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--date", type=str, help="Specific date to summarize (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--since",
        type=str,
        help='Start date for range (YYYY-MM-DD or relative like "3 days ago")',
    )
    parser.add_argument(
        "--until",
        type=str,
        help='End date for range (YYYY-MM-DD or relative like "yesterday")',
    )
    parser.add_argument(
        "-b",
        "--branch",
        type=str,
        default=GlobalConfig.CURRENT_BRANCH,
        help="Branch to summarize (default: HEAD)",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=str,
        choices=available_formats(),
        default="pretty",
        help="Output format (default: pretty)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Include file lists and detailed stats"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimal output - just the summary"
    )
    parser.add_argument(
        "--repo",
        type=str,
        default=".",
        help="Path to git repository (defaults to current directory)",
    )
    parser.add_argument(
        "--no-llm", action="store_true", help="Skip LLM summary, just show git data"
    )
    parser.add_argument(
        "--llm",
        type=str,
        default=None,
        help="LLM provider (anthropic, deepseek, gemini, ollama, mock)\n"
        "(default: DEFAULT_LLM from .env, or anthropic)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: LOG_LEVEL from .env, or WARNING)",
    )
    return parser


def resolve_date_range(
    args: argparse.Namespace,
) -> Tuple[Optional[str], Optional[str]]:
    """--date 表示一整天，优先于 --since/--until"""
    if args.date:
        return f"{args.date} 00:00:00", f"{args.date} 23:59:59"
    return args.since, args.until


def build_context(args: argparse.Namespace, global_config: GlobalConfig) -> RunContext:
    since, until = resolve_date_range(args)
    return RunContext(
        repo_path=args.repo,
        branch=args.branch,
        since=since,
        until=until,
        output_format=args.format,
        verbose=args.verbose,
        quiet=args.quiet,
        llm_id=(args.llm or global_config.DEFAULT_LLM).lower(),
        no_llm=args.no_llm,
        global_config=global_config,
    )


def run_cli(argv: Optional[List[str]] = None) -> int:
    """主入口点，返回进程退出码。"""
    parser = setup_parser()
    args = parser.parse_args(argv)

    global_config = GlobalConfig()
    utils.setup_logging(args.log_level or global_config.LOG_LEVEL)

    run_context = build_context(args, global_config)
    logger.info(
        f"🚀 git-summary 启动: repo={run_context.repo_path}, "
        f"branch={run_context.branch}, format={run_context.output_format}"
    )

    try:
        output = SummaryOrchestrator(run_context).run()
    except GitSummaryError as e:
        logger.error(f"❌ {e}")
        return 1

    if output is None:
        print(NO_COMMITS_MESSAGE, file=sys.stderr)
        return 0

    print(output.rstrip("\n"))
    return 0
