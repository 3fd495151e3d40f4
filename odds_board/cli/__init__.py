"""Command-line interface for the odds board."""
