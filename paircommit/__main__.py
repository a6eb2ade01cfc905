"""Allow running paircommit with 'python -m paircommit'."""

from paircommit.cli import app

if __name__ == "__main__":
    app()
