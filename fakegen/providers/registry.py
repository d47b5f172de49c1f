"""Locale-keyed registry of Faker data-generation capabilities.

Each locale maps to a capability graph: module name (``person``,
``address``, ...) to function name to a zero-argument callable. Graphs are
built from Faker's own provider list, so the set of valid
``{{module.function}}`` tags is explicit and can be checked by plain key
lookup instead of attribute reflection at render time.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
from typing import Any, Callable, Iterable, Mapping

from faker import Factory
from faker.config import AVAILABLE_LOCALES
from faker.providers import BaseProvider

from ..core.errors import InvalidLocale
from ..core.models import CapabilityGraph

logger = logging.getLogger(__name__)

Loader = Callable[[str, "int | None"], CapabilityGraph]

# Functions Faker only supports when an optional library is installed;
# without it they raise faker.exceptions.UnsupportedFeature.
_OPTIONAL_EXTRAS: dict[tuple[str, str], str] = {
    ("misc", "image"): "PIL",
    ("misc", "xml"): "xmltodict",
}


def normalize_locale(locale: str) -> str:
    """Accept ``en-US`` as well as ``en_US``."""
    return locale.replace("-", "_")


def _module_name(provider: BaseProvider) -> str:
    # Factory.create stamps each provider with its dotted path, e.g. faker.providers.person
    dotted = getattr(provider, "__provider__", type(provider).__module__)
    return dotted.rsplit(".", 1)[-1]


def _is_zero_argument(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    return all(
        param.default is not inspect.Parameter.empty
        or param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for param in signature.parameters.values()
    )


def _extra_installed(module: str, function: str) -> bool:
    required = _OPTIONAL_EXTRAS.get((module, function))
    return required is None or importlib.util.find_spec(required) is not None


def provider_functions(
    provider: BaseProvider, module: str = ""
) -> dict[str, Callable[[], Any]]:
    """Collect the public zero-argument functions a provider declares.

    Helpers inherited from ``BaseProvider`` (``random_int``, ``numerify``,
    ...) are not part of any module, and functions whose optional library
    is missing are left out.

    Args:
        provider: Faker provider instance
        module: Module name the provider is registered under

    Returns:
        Mapping of function name to bound method
    """
    functions: dict[str, Callable[[], Any]] = {}
    for name in dir(provider):
        if name.startswith("_") or hasattr(BaseProvider, name):
            continue
        attr = getattr(provider, name)
        if (
            inspect.isroutine(attr)
            and _is_zero_argument(attr)
            and _extra_installed(module, name)
        ):
            functions[name] = attr
    return functions


def load_capabilities(locale: str, seed: int | None = None) -> CapabilityGraph:
    """Build the capability graph for one locale.

    Args:
        locale: Faker locale (``en``, ``de_DE``, ...)
        seed: Optional seed for reproducible output

    Returns:
        Capability graph keyed by module then function name
    """
    generator = Factory.create(normalize_locale(locale))
    if seed is not None:
        generator.seed_instance(seed)

    graph: CapabilityGraph = {}
    # One provider per module; keep the first should a module repeat.
    for provider in generator.providers:
        module = _module_name(provider)
        graph.setdefault(module, provider_functions(provider, module))

    logger.debug(f"Loaded {len(graph)} module(s) for locale {locale}")
    return graph


class ProviderRegistry:
    """Read-only, locale-keyed view of capability graphs.

    Graphs are loaded lazily, once per locale, and reused for the rest of
    the process.
    """

    def __init__(
        self,
        locales: Iterable[str] | None = None,
        *,
        seed: int | None = None,
        loader: Loader = load_capabilities,
    ) -> None:
        available = AVAILABLE_LOCALES if locales is None else locales
        self._locales = frozenset(normalize_locale(locale) for locale in available)
        self._seed = seed
        self._loader = loader
        self._graphs: dict[str, CapabilityGraph] = {}

    @classmethod
    def from_mapping(cls, graphs: Mapping[str, CapabilityGraph]) -> "ProviderRegistry":
        """Build a registry over pre-built graphs instead of Faker."""
        static = {normalize_locale(locale): graph for locale, graph in graphs.items()}
        return cls(static, loader=lambda locale, seed: static[locale])

    def locales(self) -> list[str]:
        """Return supported locales, sorted."""
        return sorted(self._locales)

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and normalize_locale(locale) in self._locales

    def get(self, locale: str) -> CapabilityGraph:
        """Return the capability graph for a locale.

        Raises:
            InvalidLocale: If the locale is not supported
        """
        key = normalize_locale(locale)
        if key not in self._locales:
            raise InvalidLocale(locale)
        if key not in self._graphs:
            self._graphs[key] = self._loader(key, self._seed)
        return self._graphs[key]
