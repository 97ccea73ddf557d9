"""Schema package for external and internal contracts."""

from .requests import BuildInput, BuildOptions
from .responses import BuildResult, DocumentSummary

__all__ = ["BuildInput", "BuildOptions", "BuildResult", "DocumentSummary"]
