"""
mantra CLI - Main Entry Point

This module allows the CLI to be run as a Python module:
    python -m mantra.cli
"""

from mantra.cli.main_commands import app


def main() -> None:
    """
    Main entry point for the CLI (console script and `python -m mantra.cli`).

    It delegates to the Typer app for command parsing and execution.
    """
    app()


if __name__ == "__main__":
    main()
