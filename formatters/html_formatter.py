"""
[V4.2] HTML 渲染器 - Jinja2 模板引擎
负责准备数据上下文，并调用 Jinja2 模板渲染 HTML。
"""
import logging
import os

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import GlobalConfig
from models import SummaryResult
from utils import format_timestamp
from .base import Formatter, register_formatter

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "report.html.j2"


def _templates_dir() -> str:
    return os.path.join(GlobalConfig.SCRIPT_BASE_PATH, GlobalConfig.TEMPLATES_DIR_NAME)


def _get_css_styles() -> str:
    """读取 CSS 文件内容"""
    css_path = os.path.join(_templates_dir(), "styles.css")
    try:
        with open(css_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.warning(f"⚠️ CSS 模板文件未找到: {css_path}")
        return ""


@register_formatter("html")
class HtmlFormatter(Formatter):
    def __init__(self):
        self.env = Environment(
            loader=FileSystemLoader(_templates_dir()),
            autoescape=select_autoescape(["html", "xml", "j2"]),
        )
        self.env.filters["short_time"] = format_timestamp

    def format(
        self, data: SummaryResult, summary: str, verbose: bool, quiet: bool
    ) -> str:
        # 摘要为 Markdown，先转为 HTML
        summary_html = markdown.markdown(
            summary, extensions=["fenced_code", "tables", "sane_lists"]
        )
        template = self.env.get_template(TEMPLATE_NAME)
        logger.info(f"🎨 正在渲染 Jinja2 模板: {TEMPLATE_NAME}")
        return template.render(
            data=data,
            summary_html=summary_html,
            css_content=_get_css_styles(),
            verbose=verbose,
            quiet=quiet,
        )
