"""Command line interface for degenerate."""
