"""Command-line interface for styledown."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text as RichText

from styledown import __version__
from styledown.config import GeneratorOptions, get_settings
from styledown.core.generator import StyledTextGenerator, UnsupportedBlockError
from styledown.formatting.attributes import StyledText
from styledown.formatting.loader import load_json
from styledown.logging_utils import configure_logging

app = typer.Typer(
    name="styledown",
    help="Render a parsed Markdown tree (JSON) into styled text runs.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"styledown v{__version__}")
        raise typer.Exit()


def build_runs_table(runs: StyledText) -> Table:
    """Build a table describing each run and its main attributes."""
    table = Table(title=f"{len(runs)} run(s)")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Font")
    table.add_column("Size", justify="right")
    table.add_column("After", justify="right")
    table.add_column("Markup")

    for index, run in enumerate(runs):
        attributes = run.attributes
        level = attributes.header_level
        kind = f"heading {level}" if level is not None else "paragraph"
        table.add_row(
            str(index),
            kind,
            attributes.font_name,
            f"{attributes.font_size:g}",
            f"{attributes.paragraph.paragraph_spacing:g}",
            RichText(run.text),
        )
    return table


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="JSON file holding the parsed document tree",
        exists=True,
        dir_okay=False,
    ),
    font_size: Optional[float] = typer.Option(
        None,
        "--font-size",
        "-s",
        min=0.1,
        help="Base font size in points (default: 14)",
    ),
    font_family: Optional[str] = typer.Option(
        None,
        "--font-family",
        "-f",
        help='Font family list, e.g. \'"Times New Roman",Times,serif\'',
    ),
    font_color: Optional[str] = typer.Option(
        None,
        "--font-color",
        "-c",
        help="Text color (hex value or color name)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on block kinds that produce no styled text",
    ),
    markup_only: bool = typer.Option(
        False,
        "--markup",
        "-m",
        help="Print only the inline markup of each run",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render a parsed Markdown tree into styled text runs.

    Examples:

        styledown document.json

        styledown document.json --font-size 12 --font-family Helvetica

        styledown document.json --markup  # Inline markup only

        styledown document.json --strict  # Fail on unsupported blocks
    """
    settings = get_settings()
    configure_logging(settings.log_level, verbose=verbose)

    overrides = {
        "font_size": font_size,
        "font_family": font_family,
        "font_color": font_color,
    }
    if strict:
        overrides["strict"] = True
    settings = settings.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    try:
        config = settings.to_generator_config()
        generator = StyledTextGenerator(config)
        if verbose:
            console.print(f"[blue]Input:[/blue] {path}")
            console.print(
                f"[blue]Font:[/blue] {config.font_family} -> "
                f"{generator.styles.font_name} {config.font_size:g}pt",
                highlight=False,
            )
            if GeneratorOptions.STRICT in config.options:
                console.print("[blue]Strict mode:[/blue] Enabled")
        document = load_json(path)
        runs = generator.generate(document)
    except (ValueError, UnsupportedBlockError) as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    logger.info("Rendered %d run(s) from %s", len(runs), path)

    if markup_only:
        # Markup is printed as is: no wrapping, no emoji codes
        for run in runs:
            console.print(
                run.text,
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
    else:
        console.print(build_runs_table(runs))


if __name__ == "__main__":
    app()
