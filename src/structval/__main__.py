"""Entry point for ``python -m structval``."""

from structval.cli import app

if __name__ == "__main__":
    app()
