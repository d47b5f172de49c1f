"""Container framing for the supported output formats."""

from __future__ import annotations

from ..core.errors import InvalidCsvTemplate
from ..core.models import FormatLayout, OutputFormat


def adapt_format(raw_template: str, output_format: OutputFormat | str) -> FormatLayout:
    """Decide header, footer, separator and record template for a format.

    For CSV the template must be exactly two lines: a literal header row,
    written untemplated, and the record row. Trailing blank lines count.

    Args:
        raw_template: Template text as read from disk
        output_format: Format selector

    Returns:
        Layout used by the render loop

    Raises:
        InvalidCsvTemplate: If a CSV template is not exactly two lines
    """
    output_format = OutputFormat(output_format)

    if output_format is OutputFormat.CSV:
        lines = raw_template.split("\n")
        if len(lines) != 2:
            raise InvalidCsvTemplate(len(lines))
        header, record = lines
        # The header row is always written, even when empty, on its own line.
        return FormatLayout(header=f"{header}\n", separator="\n", record_template=record)

    if output_format is OutputFormat.JSON:
        return FormatLayout(
            header="[", footer="]", separator=",\n", record_template=raw_template
        )

    return FormatLayout(separator="\n", record_template=raw_template)
