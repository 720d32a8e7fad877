"""CLI application entry point for union-fonts.

This module provides the main CLI interface using Typer.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from unionfonts import __version__
from unionfonts.backends import configure
from unionfonts.cli.output import (
    console,
    print_error,
    print_font_summary,
    print_header,
    print_step,
    print_tags,
    print_value,
)
from unionfonts.config import BackendChoice, LoggingConfig, UnionFontsSettings
from unionfonts.core import system_font
from unionfonts.domain import (
    NUMERIC_WEIGHTS,
    Design,
    OpenTypeFeatures,
    Weight,
    character_variant,
    stylistic_set,
    weight_from_int,
)
from unionfonts.domain.features import CHARACTER_VARIANT_RANGE, STYLISTIC_SET_RANGE
from unionfonts.exceptions import UnionFontsError
from unionfonts.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="union-fonts",
    help="Build system fonts with OpenType features and numeric weights.",
    add_completion=False,
    no_args_is_help=True,
)


class TagFamily(str, Enum):
    """Numbered OpenType feature families."""

    CV = "cv"
    SS = "ss"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]union-fonts[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build system fonts with OpenType features and numeric weights."""


@app.command()
def tags() -> None:
    """List the named OpenType feature tags."""
    print_tags(OpenTypeFeatures.named())


@app.command()
def tag(
    family: Annotated[
        TagFamily,
        typer.Argument(help="Feature family: cv (character variant) or ss (stylistic set)"),
    ],
    number: Annotated[int, typer.Argument(help="Variant or set number")],
) -> None:
    """Format a numbered feature tag, e.g. `tag cv 9` -> cv09."""
    if family is TagFamily.CV:
        if number not in CHARACTER_VARIANT_RANGE:
            print_error(f"Invalid character variant: {number}", details="Valid range: 1-99")
            raise typer.Exit(code=1)
        print_value("Character variant", character_variant(number))
    else:
        if number not in STYLISTIC_SET_RANGE:
            print_error(f"Invalid stylistic set: {number}", details="Valid range: 1-20")
            raise typer.Exit(code=1)
        print_value("Stylistic set", stylistic_set(number))


@app.command()
def weight(
    value: Annotated[int, typer.Argument(help="Numeric weight (100, 200, ... 900)")],
) -> None:
    """Show the named weight for a numeric weight."""
    if value not in NUMERIC_WEIGHTS:
        print_error(
            f"Unsupported weight: {value}",
            details="Valid values: " + ", ".join(str(w) for w in NUMERIC_WEIGHTS),
        )
        raise typer.Exit(code=1)
    print_value(f"Weight {value}", weight_from_int(value).value)


def _parse_weight(value: str) -> Weight:
    """Parse a weight given by name or number."""
    if value.isdecimal():
        number = int(value)
        if number not in NUMERIC_WEIGHTS:
            raise typer.BadParameter(
                f"{value} is not one of " + ", ".join(str(w) for w in NUMERIC_WEIGHTS)
            )
        return weight_from_int(number)
    for named in Weight:
        if value.lower() in (named.value.lower(), named.name.lower()):
            return named
    raise typer.BadParameter(
        f"Unknown weight '{value}' (expected one of {', '.join(w.value for w in Weight)})"
    )


def _parse_features(options: list[str]) -> dict[str, int]:
    """Parse TAG or TAG=VALUE feature options."""
    features: dict[str, int] = {}
    for option in options:
        tag_name, sep, raw_value = option.partition("=")
        if len(tag_name) != 4 or not tag_name.isascii() or not tag_name.isprintable():
            raise typer.BadParameter(f"'{tag_name}' is not a 4-character OpenType tag")
        if not sep:
            features[tag_name] = 1
            continue
        if raw_value.lower() in ("on", "true"):
            features[tag_name] = 1
        elif raw_value.lower() in ("off", "false"):
            features[tag_name] = 0
        elif raw_value.isdecimal():
            features[tag_name] = int(raw_value)
        else:
            raise typer.BadParameter(f"Invalid value '{raw_value}' for feature '{tag_name}'")
    return features


@app.command()
def build(
    size: Annotated[
        float,
        typer.Argument(help="Point size", min=0.0, show_default=False),
    ],
    weight_name: Annotated[
        str,
        typer.Option(
            "--weight",
            "-w",
            help="Weight name (thin, bold, ...) or number (100-900)",
        ),
    ] = Weight.REGULAR.value,
    design: Annotated[
        Design,
        typer.Option(
            "--design",
            "-d",
            help="System design",
            case_sensitive=False,
        ),
    ] = Design.DEFAULT,
    feature: Annotated[
        list[str] | None,
        typer.Option(
            "--feature",
            "-f",
            help="OpenType feature as TAG or TAG=VALUE (repeatable)",
        ),
    ] = None,
    backend: Annotated[
        BackendChoice,
        typer.Option(
            "--backend",
            "-b",
            help="Native toolkit backend",
            case_sensitive=False,
        ),
    ] = BackendChoice.AUTO,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Build a system font with OpenType features and describe the result.

    Example:
        union-fonts build 16 --weight 700 --design rounded -f cv09 -f zero=0
    """
    if size <= 0:
        print_error(f"Invalid size: {size:g}", details="Size must be greater than zero.")
        raise typer.Exit(code=1)

    named_weight = _parse_weight(weight_name)
    features = _parse_features(feature or [])

    try:
        settings = UnionFontsSettings(
            backend=backend,
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValueError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Building font")

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        active = configure(settings)
        logger.info("Building font", backend=active.name, size=size, features=features)
        font = system_font(size, named_weight, design, open_type_features=features)
    except UnionFontsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_font_summary(font)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
