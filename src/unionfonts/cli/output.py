"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from unionfonts.domain.font import Font

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]union-fonts[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_tags(tags: dict[str, str]) -> None:
    """Print the named feature tags as a table.

    Args:
        tags: Constant name -> OpenType tag
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Tag", style="cyan")
    for name, tag in tags.items():
        table.add_row(name, tag)
    console.print(table)


def print_value(label: str, value: str) -> None:
    """Print a single labelled result."""
    line = Text(f"{SYM_OK} {label} ")
    line.append(value, style="bold cyan")
    console.print(line)


def print_font_summary(font: Font) -> None:
    """Print a built font.

    Args:
        font: Font returned by the builder
    """
    console.print(f"\n[bold green]{SYM_OK} Font built[/bold green]")
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Backend", font.backend or "none")
    table.add_row("Size", f"{font.size:g} pt")
    table.add_row("Weight", font.weight.value)
    table.add_row("Design", font.design.value)
    if font.features:
        features = f" {SYM_DOT} ".join(f"{s.tag}={s.value}" for s in font.features)
    else:
        features = "(none applied)"
    table.add_row("Features", features)
    table.add_row("Native", Text(repr(font.native)) if font.native is not None else "-")
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
