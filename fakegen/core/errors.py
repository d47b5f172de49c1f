"""Errors raised while validating and rendering a generation run.

Every error here is fatal for the run: it is raised at the point of
validation and never logged-and-continued.
"""

from __future__ import annotations


class FakegenError(ValueError):
    """Base class for all generation errors."""


class InvalidLocale(FakegenError):
    """Raised when the requested locale has no provider."""

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(f"Invalid locale: {locale}")


class InvalidCsvTemplate(FakegenError):
    """Raised when a CSV template is not exactly a header line and a record line."""

    def __init__(self, line_count: int) -> None:
        self.line_count = line_count
        super().__init__(
            "Invalid CSV template: expected exactly 2 lines (header and record), "
            f"got {line_count}"
        )


class MissingField(FakegenError):
    """Raised when a tag lacks its module or function segment."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing {field}")


class InvalidModule(FakegenError):
    """Raised when a tag's module is not provided for the locale."""

    def __init__(self, locale: str, module: str) -> None:
        self.locale = locale
        self.module = module
        super().__init__(f"Invalid {module} module for {locale} instance")


class InvalidFunction(FakegenError):
    """Raised when a tag's function is not a zero-argument callable of its module."""

    def __init__(self, locale: str, function: str) -> None:
        self.locale = locale
        self.function = function
        super().__init__(f"Invalid {function} function for {locale} instance")


class InvalidTemplate(FakegenError):
    """Raised when a record template cannot be parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid template: {reason}")


class UnsupportedTag(FakegenError):
    """Raised for anything but flat ``{{module.function}}`` substitution."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unsupported template tag: {tag}")
