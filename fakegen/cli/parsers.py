"""CLI argument parsers and validators."""

from __future__ import annotations

import typer

from ..core.models import OutputFormat


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_output_format(value: str) -> OutputFormat:
    """Parse an output format selector; ``none`` means the plain default."""
    normalized = value.strip().lower()
    if normalized in ("", "none"):
        return OutputFormat.DEFAULT
    try:
        return OutputFormat(normalized)
    except ValueError as e:
        choices = ", ".join(["none", *(fmt.value for fmt in OutputFormat)])
        raise typer.BadParameter(
            f"Invalid output format: {value!r} (choose from {choices})"
        ) from e
