"""Tests for output format layouts."""

import pytest

from fakegen.core.errors import InvalidCsvTemplate
from fakegen.core.models import OutputFormat
from fakegen.rendering.formats import adapt_format


def test_default_layout():
    layout = adapt_format("{{person.name}}", OutputFormat.DEFAULT)
    assert layout.header == ""
    assert layout.footer == ""
    assert layout.separator == "\n"
    assert layout.record_template == "{{person.name}}"


def test_json_layout():
    layout = adapt_format('{"name": "{{person.name}}"}', "json")
    assert layout.header == "["
    assert layout.footer == "]"
    assert layout.separator == ",\n"
    assert layout.record_template == '{"name": "{{person.name}}"}'


def test_csv_layout_splits_header_and_record():
    layout = adapt_format("name,city\n{{person.name}},{{address.city}}", "csv")
    assert layout.header == "name,city\n"
    assert layout.footer == ""
    assert layout.separator == "\n"
    assert layout.record_template == "{{person.name}},{{address.city}}"


def test_csv_empty_header_is_kept():
    layout = adapt_format("\n{{person.name}}", "csv")
    assert layout.header == "\n"


@pytest.mark.parametrize(
    "template, line_count",
    [
        ("{{person.name}}", 1),
        ("name\n{{person.name}}\n", 3),
        ("name\n{{person.name}}\n{{person.name}}", 3),
    ],
)
def test_csv_requires_exactly_two_lines(template, line_count):
    with pytest.raises(InvalidCsvTemplate) as exc_info:
        adapt_format(template, OutputFormat.CSV)
    assert exc_info.value.line_count == line_count


def test_unknown_format():
    with pytest.raises(ValueError):
        adapt_format("{{person.name}}", "xml")
