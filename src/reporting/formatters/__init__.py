"""Report formatters."""

from reporting.formatters.markdown import MarkdownFormatter

__all__ = ["MarkdownFormatter"]
