"""Command-line interface for readme-tree."""
