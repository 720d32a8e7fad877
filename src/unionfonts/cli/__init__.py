"""Command-line interface for union-fonts.

This module provides the CLI using Typer with rich output for
inspecting feature tags and weights and for trying out font builds.
"""

from unionfonts.cli.app import cli, main

__all__ = ["cli", "main"]
