"""Main entry point for ``python -m oscgrid``."""

from oscgrid.cli.main import cli

if __name__ == "__main__":
    cli()
