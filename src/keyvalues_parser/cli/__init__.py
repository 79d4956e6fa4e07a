
"""
CLI package for keyvalues_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from keyvalues_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
