"""Main CLI application."""

from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path
from typing import NoReturn, Optional

import typer
from typing_extensions import Annotated

from .. import __version__
from ..core.errors import FakegenError, InvalidModule
from ..core.models import RenderJob
from ..providers.registry import ProviderRegistry
from ..rendering import engine
from ..settings import Settings
from .parsers import parse_file_mode, parse_output_format

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="fakegen",
    help="Generate fake data files from a single-record template using Faker.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fakegen {__version__}")
        typer.echo("Generate fake data files from a single-record template")
        typer.echo(f"using faker {metadata.version('Faker')}")
        raise typer.Exit()


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def cli(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Output the current version.",
        ),
    ] = False,
) -> None:
    """Generate fake data files from a single-record template using Faker."""


@app.command()
def render(
    template: Annotated[
        Path,
        typer.Argument(help="The template for a single record in file format."),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Generated output file."),
    ],
    total_records: Annotated[
        Optional[int],
        typer.Option(
            "--total-records",
            "-t",
            help="Total number of records to generate (default: 1000).",
            metavar="NUMBER",
        ),
    ] = None,
    lang: Annotated[
        Optional[str],
        typer.Option(
            "--lang",
            "-l",
            help="Locale to use for faker (default: en).",
            metavar="LOCALE",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output container: none, csv or json. A csv template is a header line and a record line.",
            metavar="FORMAT",
        ),
    ] = "none",
    seed: Annotated[
        Optional[int],
        typer.Option(
            "--seed",
            help="Seed the generator for reproducible output.",
        ),
    ] = None,
    file_mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render TEMPLATE repeatedly into OUTPUT with fake data."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    settings = Settings()
    cwd = Path.cwd()

    try:
        job = RenderJob(
            template_path=template if template.is_absolute() else cwd / template,
            output_path=output if output.is_absolute() else cwd / output,
            total_records=settings.total_records if total_records is None else total_records,
            locale=lang or settings.locale,
            output_format=parse_output_format(output_format),
            seed=seed,
            file_mode=parse_file_mode(file_mode or settings.file_mode),
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    logger.debug(f"Job: {job.model_dump()}")
    logger.info("Starting fake data generation...")

    try:
        engine.run_job(job, ProviderRegistry(seed=job.seed))
    except (FakegenError, FileNotFoundError) as e:
        _fail(e)

    logger.info("Generation completed!")


@app.command()
def locales() -> None:
    """List the supported locales."""
    for locale in ProviderRegistry().locales():
        typer.echo(locale)


@app.command()
def modules(
    module: Annotated[
        Optional[str],
        typer.Argument(help="List the functions of this module instead."),
    ] = None,
    lang: Annotated[
        Optional[str],
        typer.Option("--lang", "-l", help="Locale to inspect (default: en).", metavar="LOCALE"),
    ] = None,
) -> None:
    """List the modules of a locale, or the functions of one module."""
    locale = lang or Settings().locale
    try:
        graph = ProviderRegistry().get(locale)
    except FakegenError as e:
        _fail(e)

    if module is None:
        names = graph.keys()
    elif module in graph:
        names = graph[module].keys()
    else:
        _fail(InvalidModule(locale, module))

    for name in sorted(names):
        typer.echo(name)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
