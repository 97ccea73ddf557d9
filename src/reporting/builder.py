"""Builder to convert BuildResult to ReportData structure."""

from datetime import datetime

from docsite import __version__
from schemas.responses import BuildResult

from reporting.schemas import (
    DiagnosticGroup,
    DiagnosticRow,
    ReportData,
    ReportDataMetadata,
    SummaryRow,
)
from reporting.utils import get_kind_label, kind_rank


class ReportDataBuilder:
    """Builds structured ReportData from a BuildResult."""

    def __init__(
        self,
        result: BuildResult,
        *,
        report_title: str = "Documentation Build Report",
        generated_at: datetime | None = None,
    ):
        self.result = result
        self.report_title = report_title
        self.generated_at = generated_at

    def build(self) -> ReportData:
        """Build the complete ReportData structure."""
        return ReportData(
            metadata=self._build_metadata(),
            summary=self._build_summary(),
            groups=self._build_groups(),
            warnings=list(self.result.warnings),
            passed=self.result.error_count == 0,
        )

    def _build_metadata(self) -> ReportDataMetadata:
        return ReportDataMetadata(
            report_title=self.report_title,
            generated_at=self.generated_at or datetime.now(),
            root=self.result.root,
            fingerprint=self.result.fingerprint,
            system_version=__version__,
            runtime_ms=self.result.runtime_ms,
        )

    def _build_summary(self) -> list[SummaryRow]:
        counts = self.result.counts
        labels = [
            ("documents", "Documents"),
            ("sections", "Sections"),
            ("resolved_links", "Resolved links"),
            ("broken_links", "Broken links"),
            ("errors", "Errors"),
            ("warnings", "Warnings"),
        ]
        return [SummaryRow(label=label, value=int(counts.get(key, 0))) for key, label in labels]

    def _build_groups(self) -> list[DiagnosticGroup]:
        grouped: dict[str, DiagnosticGroup] = {}
        for diagnostic in self.result.diagnostics:
            group = grouped.get(diagnostic.kind)
            if group is None:
                group = DiagnosticGroup(
                    kind=diagnostic.kind,
                    label=get_kind_label(diagnostic.kind),
                    severity=diagnostic.severity,
                )
                grouped[diagnostic.kind] = group
            group.rows.append(
                DiagnosticRow(
                    path=diagnostic.path,
                    line=diagnostic.line,
                    severity=diagnostic.severity,
                    target=diagnostic.target,
                    message=diagnostic.message,
                )
            )
        return sorted(grouped.values(), key=lambda group: kind_rank(group.kind))
