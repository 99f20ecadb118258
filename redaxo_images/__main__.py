"""Allow running as python -m redaxo_images."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
