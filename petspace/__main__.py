"""Entry point for running petspace as a module: python -m petspace."""

from petspace.cli.main import app

if __name__ == "__main__":
    app()
