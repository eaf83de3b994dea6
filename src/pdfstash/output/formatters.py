"""Human/JSON output for ServiceResult.

JSON mode dumps the whole result. Human mode prints an ``OK: <op>``
header followed by key-value lines, except document listings, which
render as a table.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table

from pdfstash.output.console import create_console, get_output

if TYPE_CHECKING:
    from pdfstash.services.result import ServiceResult

# Keys shown for single-document results, in order.
_DOCUMENT_KEYS = ("name", "path", "size", "size_bytes", "date", "modified_at")


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    ordered = [key for key in _DOCUMENT_KEYS if key in data]
    ordered += [key for key in data if key not in ordered]
    lines: list[str] = []
    for key in ordered:
        value = data[key]
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def _format_listing(data: dict[str, Any]) -> str:
    items: list[dict[str, Any]] = data.get("items", [])
    if not items:
        return f"No PDFs in {data.get('directory', 'store')}"

    console = create_console()
    table = Table(show_header=True, header_style="stash.op", box=None)
    table.add_column("Name", style="stash.name")
    table.add_column("Size", style="stash.size", justify="right")
    table.add_column("Date", style="stash.date")
    for item in items:
        table.add_row(item["name"], item["size"], item["date"])
    console.print(table)
    console.print(f"{data['count']} PDF(s) in {data['directory']}", style="stash.key")
    return get_output(console).rstrip("\n")


def _format_quiet(result: ServiceResult) -> str:
    if "items" in result.data:
        return "\n".join(item["name"] for item in result.data["items"])
    return str(result.data.get("path") or result.data.get("name") or "")


def format_result(result: ServiceResult, *, json_output: bool = False, quiet: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Return JSON instead of human-readable text.
        quiet: Print only names/paths on success.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"
    if quiet:
        return _format_quiet(result)
    if result.op == "list":
        return _format_listing(result.data)
    parts = [f"OK: {result.op}"]
    if result.data:
        parts.append(_format_data_human(result.data))
    return "\n".join(parts)
