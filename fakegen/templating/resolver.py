"""Resolve placeholder tags to capability callables."""

from __future__ import annotations

import logging
from typing import Iterable

from ..core.errors import InvalidFunction, InvalidModule, MissingField
from ..core.models import CapabilityGraph
from ..providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def split_tag(tag: str) -> tuple[str, str]:
    """Split ``module.function`` on its first dot.

    The function segment may come back empty; it is checked once the
    module is known to exist.

    Raises:
        MissingField: If the tag has no module segment
    """
    module, dot, function = tag.partition(".")
    if not dot or not module:
        raise MissingField("faker module")
    return module, function


def resolve(
    locale: str, registry: ProviderRegistry, tags: Iterable[str]
) -> CapabilityGraph:
    """Resolve tags against a locale's capability graph.

    Tags are checked in sorted order, so a given tag set always fails on the
    same tag. Callables are returned uninvoked.

    Args:
        locale: Locale to resolve against
        registry: Provider registry
        tags: Dotted ``module.function`` paths

    Returns:
        Mapping of module name to function name to callable

    Raises:
        InvalidLocale: If the locale is not supported
        MissingField: If a tag lacks a module or function segment
        InvalidModule: If a module is not provided for the locale
        InvalidFunction: If a function is not a zero-argument callable
    """
    graph = registry.get(locale)
    resolved: CapabilityGraph = {}

    for tag in sorted(tags):
        module, function = split_tag(tag)

        functions = graph.get(module)
        if not isinstance(functions, dict):
            raise InvalidModule(locale, module)

        if not function:
            raise MissingField("faker function")
        entry = functions.get(function)
        if not callable(entry):
            raise InvalidFunction(locale, function)

        resolved.setdefault(module, {})[function] = entry

    logger.debug(f"Resolved {len(resolved)} module(s) for locale {locale}")
    return resolved
