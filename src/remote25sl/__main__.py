"""Main entry point for remote25sl."""

from remote25sl.cli.main import cli

if __name__ == "__main__":
    cli()
