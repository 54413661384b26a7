"""Command-line interface."""

from cp1256_escape.cli.app import create_app
from cp1256_escape.cli.main import main

__all__ = ["create_app", "main"]
