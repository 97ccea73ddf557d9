"""Diagnostics report schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReportDataMetadata(BaseModel):
    """Metadata about the build the report describes."""

    report_title: str
    generated_at: datetime
    root: str
    fingerprint: str
    system_version: str
    runtime_ms: int | None = None

    model_config = ConfigDict(extra="forbid")


class DiagnosticRow(BaseModel):
    path: str
    line: int | None = None
    severity: str
    target: str | None = None
    message: str

    model_config = ConfigDict(extra="forbid")


class DiagnosticGroup(BaseModel):
    """All diagnostics of one kind."""

    kind: str
    label: str
    severity: str
    rows: list[DiagnosticRow] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class SummaryRow(BaseModel):
    label: str
    value: int

    model_config = ConfigDict(extra="forbid")


class ReportData(BaseModel):
    """Complete structured data for a diagnostics report."""

    metadata: ReportDataMetadata
    summary: list[SummaryRow] = Field(default_factory=list)
    groups: list[DiagnosticGroup] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    passed: bool = True

    model_config = ConfigDict(extra="forbid")
