"""Command-line interface for namesuggest."""
