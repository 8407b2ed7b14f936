"""Output formatters for scan results."""

from profanity.formatters.json import format_as_json
from profanity.formatters.sarif import format_as_sarif

__all__ = ["format_as_sarif", "format_as_json"]
