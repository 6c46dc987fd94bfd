"""Output formatters for targets and generated plans."""

from fitplan.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    get_formatter,
)

__all__ = ["TableFormatter", "JSONFormatter", "MarkdownFormatter", "get_formatter"]
