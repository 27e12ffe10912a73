"""Command-line interface for utcolor."""

from utcolor.cli.app import build_session, create_app, parse_range
from utcolor.cli.main import main

__all__ = ["build_session", "create_app", "parse_range", "main"]
