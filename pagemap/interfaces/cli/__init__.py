"""
Cli package.
"""

from .cli_main import build_parser, main

__all__ = ["build_parser", "main"]
