"""Command-line interface for basehan."""
