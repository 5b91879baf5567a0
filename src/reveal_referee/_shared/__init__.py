# Area: Shared
"""
Shared utilities used by the match core and the Discord adapter.

This package contains:
- Logging configuration
- Structured error formatting
"""

from .logging_config import (
    setup_logging,
    log_unexpected_error,
    TerminalFormatter,
    JSONFormatter,
)
from .error_formatter import format_error_block, indent_json

__all__ = [
    "setup_logging",
    "log_unexpected_error",
    "TerminalFormatter",
    "JSONFormatter",
    "format_error_block",
    "indent_json",
]
