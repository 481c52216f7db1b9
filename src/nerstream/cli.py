"""nerstream CLI."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from nerstream.config import settings
from nerstream.errors import CorpusFormatError
from nerstream.models import EntityTypeFilter, NameSample
from nerstream.pipeline import NameSampleStream

app = typer.Typer(
    name="nerstream",
    help="Decode IOB2-annotated NER corpora into name samples",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich."""
    level = logging.DEBUG if verbose else settings.log_level
    try:
        logging.basicConfig(
            level=level,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="NERSTREAM_LOG_LEVEL")


def _type_filter(types: Optional[str]) -> EntityTypeFilter:
    if types is None:
        try:
            type_filter = settings.entity_filter
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="NERSTREAM_ENTITY_TYPES")
    else:
        try:
            type_filter = EntityTypeFilter.from_names(n for n in types.split(",") if n.strip())
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--types")

    logger.info("Entity types: %s", ", ".join(t.value for t in type_filter.enabled_types) or "none")
    return type_filter


def _fail(message: str) -> None:
    console.print(f"[bold red]Invalid corpus:[/bold red] {escape(message)}", highlight=False)


def _print_sample(sample: NameSample, entities: bool) -> None:
    console.print(str(sample), markup=False, highlight=False)
    if entities:
        for label, text in sample.entity_texts():
            console.print(f"  {label}: {text}", markup=False, highlight=False)


@app.command()
def show(
    corpus: Path = typer.Argument(..., exists=True, dir_okay=False, help="Path to corpus file"),
    types: Optional[str] = typer.Option(None, help="Entity types to emit, e.g. PER,LOC"),
    limit: int = typer.Option(10, help="Maximum samples to print (0 for all)"),
    entities: bool = typer.Option(False, "--entities", "-e", help="List entities under each sample"),
    encoding: Optional[str] = typer.Option(None, help="Corpus file encoding"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Print decoded samples in inline <START:type> ... <END> form."""
    setup_logging(verbose)
    type_filter = _type_filter(types)

    with NameSampleStream.from_path(corpus, types=type_filter, encoding=encoding) as samples:
        try:
            for count, sample in enumerate(samples, start=1):
                _print_sample(sample, entities)
                if limit and count >= limit:
                    break
        except CorpusFormatError as e:
            _fail(str(e))
            raise typer.Exit(code=1)
        except (UnicodeDecodeError, LookupError) as e:
            _fail(f"cannot read {corpus} as {samples.line_source.encoding}: {e}")
            raise typer.Exit(code=1)


@app.command()
def validate(
    corpus: Path = typer.Argument(..., exists=True, dir_okay=False, help="Path to corpus file"),
    types: Optional[str] = typer.Option(None, help="Entity types to emit, e.g. PER,LOC"),
    encoding: Optional[str] = typer.Option(None, help="Corpus file encoding"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Decode a whole corpus and report the first format error."""
    setup_logging(verbose)
    type_filter = _type_filter(types)

    count = 0
    with NameSampleStream.from_path(corpus, types=type_filter, encoding=encoding) as samples:
        try:
            for _ in samples:
                count += 1
        except CorpusFormatError as e:
            _fail(str(e))
            console.print(f"[dim]{count} samples decoded before the error[/dim]")
            raise typer.Exit(code=1)
        except (UnicodeDecodeError, LookupError) as e:
            _fail(f"cannot read {corpus} as {samples.line_source.encoding}: {e}")
            raise typer.Exit(code=1)

    console.print(f"[bold green]OK:[/bold green] {count} samples")


if __name__ == "__main__":
    app()
