"""Command-line interface for traza."""
