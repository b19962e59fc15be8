"""Command-line interface for AlphaQuest.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Letter menu with completion marks
- Offline scoring of stroke files per level
- Threshold and progress management
- Detailed error reporting
"""

from alphaquest.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
