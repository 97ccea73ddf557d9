"""Markdown formatter for build diagnostics reports."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from reporting.schemas import ReportData
from reporting.utils import escape_markdown, format_timestamp

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "default"
TEMPLATE_NAME = "report.md.j2"


class MarkdownFormatter:
    """Renders ReportData through the `report.md.j2` Jinja2 template.

    A custom ``template_dir`` must contain its own ``report.md.j2``.
    """

    def __init__(self, template_dir: Path | None = None):
        self.template_dir = template_dir or DEFAULT_TEMPLATE_DIR
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["format_timestamp"] = format_timestamp
        self.jinja_env.filters["escape_md"] = escape_markdown

    def format(self, data: ReportData) -> str:
        template = self.jinja_env.get_template(TEMPLATE_NAME)
        return template.render(data=data)
