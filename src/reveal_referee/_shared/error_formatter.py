# Area: Shared
"""Error formatting for structured unexpected-error logs."""

from __future__ import annotations
import json
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def format_error_block(
    error: BaseException,
    operation: str,
    context: Optional[Dict[str, Any]] = None,
) -> str:
    """Format a structured error block for a failure at a request boundary."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " UNEXPECTED ERROR — REQUEST ABORTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error.__class__.__name__}",
        f" Operation:    {operation}",
        f" Message:      {error}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(indent_json(context))

    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    if error.__traceback__ is not None:
        lines.append("")
        lines.append(" ── TRACEBACK " + "─" * 50)
        lines.extend(" " + line for line in tb.rstrip().split("\n"))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
