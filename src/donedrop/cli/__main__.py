"""Allow running the CLI with ``python -m donedrop.cli``."""

from donedrop.cli import cli

if __name__ == "__main__":
    cli()
