"""
CLI module for logconverter.

Provides the command-line interface using Click.
"""

from logconverter.cli.main import cli, main

__all__ = ["main", "cli"]
