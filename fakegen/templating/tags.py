"""Placeholder tag extraction."""

from __future__ import annotations

import re

# {{ module.function }}, optionally led by a Mustache control character
_TAG_PATTERN = re.compile(r"{{\s*([#/^!]?)\s*([\w.]+)\s*}}")

# Mustache comments may hold any text, including spaces and newlines.
_COMMENT_PATTERN = re.compile(r"{{\s*!.*?}}", re.DOTALL)

_SECTION_PATTERN = re.compile(r"{{\s*[#/^].*?}}", re.DOTALL)


def extract_tags(template: str) -> set[str]:
    """Collect the distinct dotted paths referenced by a template.

    Control characters (``#``, ``/``, ``^``, ``!``) are stripped from the tag
    name. Extraction never fails; text that does not match is ignored.

    Args:
        template: Raw template text

    Returns:
        Set of tag paths such as ``person.name``
    """
    return {match.group(2) for match in _TAG_PATTERN.finditer(template) if match.group(2)}


def strip_comments(template: str) -> str:
    """Remove Mustache comments such as ``{{! note }}``."""
    return _COMMENT_PATTERN.sub("", template)


def find_section_tags(template: str) -> set[str]:
    """Return section, inverted and closing tags, e.g. ``{{#person.name}}``."""
    return set(_SECTION_PATTERN.findall(template))
