"""Command line interface for sauce-dump."""

from sauce_dump.cli.app import create_app
from sauce_dump.cli.main import main

__all__ = ["create_app", "main"]
