"""Allow running as ``python -m namesuggest``."""

from namesuggest.cli.app import app

if __name__ == "__main__":
    app()
