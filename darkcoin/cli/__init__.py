"""Command-line interface for darkcoin."""
