"""Entry point for the jot CLI.

Usage:
    python -m jot.interfaces.cli.main

Or via installed entry point:
    jot <command>
"""

from jot.interfaces.cli import app


def main() -> None:
    """Run the jot CLI application."""
    app()


if __name__ == "__main__":
    main()
