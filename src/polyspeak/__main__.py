"""Entry point for running polyspeak as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the polyspeak CLI application."""
    app()


if __name__ == "__main__":
    main()
