"""Report generator coordinating the builder and formatter."""

from datetime import datetime
from pathlib import Path

from reporting.builder import ReportDataBuilder
from reporting.formatters import MarkdownFormatter
from schemas.responses import BuildResult


class ReportGenerator:
    """Renders a BuildResult as a Markdown diagnostics report."""

    def __init__(
        self,
        *,
        report_title: str = "Documentation Build Report",
        template_dir: Path | None = None,
    ):
        self.report_title = report_title
        self.formatter = MarkdownFormatter(template_dir)

    def render(self, result: BuildResult, *, generated_at: datetime | None = None) -> str:
        data = ReportDataBuilder(
            result,
            report_title=self.report_title,
            generated_at=generated_at,
        ).build()
        return self.formatter.format(data)

    def write(self, result: BuildResult, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(result), encoding="utf-8")
        return output_path
