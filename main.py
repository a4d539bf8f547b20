"""Entry point for gitu CLI."""

from gitu.cli import app


def main():
    """Launch the gitu CLI."""
    app()


if __name__ == "__main__":
    main()
