"""Fakegen - fill a single-record template with Faker data, N times over.

``{{module.function}}`` tags such as ``{{person.name}}`` are resolved
against a locale's Faker providers (:mod:`fakegen.providers`), checked and
substituted by :mod:`fakegen.templating` and :mod:`fakegen.rendering`, and
the records streamed to a plain, CSV or JSON file by the ``fakegen`` CLI.
"""

__version__ = "0.1.0"

import logging

# Library use stays silent until the CLI configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .cli import main
from .providers.registry import ProviderRegistry
from .rendering.engine import render_records, run_job

__all__ = ["ProviderRegistry", "main", "render_records", "run_job"]
