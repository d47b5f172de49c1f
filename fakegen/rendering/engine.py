"""Record rendering engine."""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import TextIO

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError, nodes

from ..core.errors import InvalidTemplate, UnsupportedTag
from ..core.models import CapabilityGraph, OutputFormat, RenderJob, ResolvedContext
from ..providers.registry import ProviderRegistry
from ..templating.resolver import resolve
from ..templating.tags import extract_tags, find_section_tags, strip_comments
from .formats import adapt_format
from .io import open_output

logger = logging.getLogger(__name__)

# Mustache comments are stripped before parsing, so the comment delimiters
# never match and a literal ``{#`` stays plain text.
_ENV = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
    comment_start_string="{{!",
    comment_end_string="!}}",
)


def _is_dotted_path(expr: nodes.Node) -> bool:
    while isinstance(expr, nodes.Getattr):
        expr = expr.node
    return isinstance(expr, nodes.Name)


def _reject_constructs(tree: nodes.Template) -> None:
    """Allow literal text and ``{{a.b}}`` outputs only."""
    for node in tree.body:
        if not isinstance(node, nodes.Output):
            raise UnsupportedTag(f"{type(node).__name__.lower()} at line {node.lineno}")
        for child in node.nodes:
            if not isinstance(child, nodes.TemplateData) and not _is_dotted_path(child):
                raise UnsupportedTag(f"{type(child).__name__.lower()} at line {child.lineno}")


def compile_record_template(text: str) -> Template:
    """Compile a record template for flat ``{{module.function}}`` substitution.

    Mustache comments are dropped. Sections, statements (``{% if %}``,
    ``{% for %}``), filters, calls and subscripts are rejected.

    Args:
        text: Record template text

    Returns:
        Compiled Jinja2 template

    Raises:
        UnsupportedTag: If the template uses anything but flat substitution
        InvalidTemplate: If the template cannot be parsed
    """
    text = strip_comments(text)
    section_tags = find_section_tags(text)
    if section_tags:
        raise UnsupportedTag(sorted(section_tags)[0])

    try:
        tree = _ENV.parse(text)
    except TemplateSyntaxError as e:
        raise InvalidTemplate(f"{e.message} (line {e.lineno})") from e

    _reject_constructs(tree)
    return _ENV.from_string(tree)


def generate_record(resolved: CapabilityGraph) -> ResolvedContext:
    """Invoke every resolved generator once.

    Exceptions raised by a generator propagate unchanged.
    """
    return {
        module: {function: generate() for function, generate in functions.items()}
        for module, functions in resolved.items()
    }


def render_record(template: Template, context: ResolvedContext) -> str:
    """Substitute a record's generated values into the template."""
    # Namespaces keep ``{{module.items}}`` from resolving to dict.items.
    namespaces = {
        module: SimpleNamespace(**values) for module, values in context.items()
    }
    return template.render(**namespaces)


def render_records(
    template_text: str,
    sink: TextIO,
    total_records: int,
    locale: str,
    output_format: OutputFormat | str,
    registry: ProviderRegistry,
) -> int:
    """Render the template ``total_records`` times into ``sink``.

    The locale, the format layout and the template syntax are validated
    before anything is written. Tags are resolved on the first record and
    the bound generators reused for the rest of the run; every record still
    gets freshly generated values.

    Args:
        template_text: Raw template text
        sink: Writable text stream, owned by the caller
        total_records: Number of records to render
        locale: Provider locale
        output_format: Container format selector
        registry: Provider registry

    Returns:
        Number of records written
    """
    layout = adapt_format(template_text, output_format)
    # Unknown locales fail before any byte reaches the sink.
    registry.get(locale)
    template = compile_record_template(layout.record_template)

    sink.write(layout.header)

    resolved: CapabilityGraph | None = None
    for index in range(total_records):
        if resolved is None:
            # Tags inside comments are never rendered, so they are not resolved.
            tags = extract_tags(strip_comments(layout.record_template))
            resolved = resolve(locale, registry, tags)
        sink.write(render_record(template, generate_record(resolved)))
        if index < total_records - 1:
            sink.write(layout.separator)

    sink.write(layout.footer)
    sink.flush()
    return total_records


def run_job(job: RenderJob, registry: ProviderRegistry) -> int:
    """Execute a render job end to end.

    The output file is only replaced once every record has been written.

    Args:
        job: Render job configuration
        registry: Provider registry

    Returns:
        Number of records written
    """
    if not job.template_path.exists():
        raise FileNotFoundError(f"Template not found: {job.template_path}")

    logger.debug(f"Reading template: {job.template_path}")
    template_text = job.template_path.read_text(encoding="utf-8")

    with open_output(job.output_path, mode=job.file_mode) as sink:
        written = render_records(
            template_text,
            sink,
            job.total_records,
            job.locale,
            job.output_format,
            registry,
        )

    logger.info(f"Rendered {written} record(s) → {job.output_path}")
    return written
