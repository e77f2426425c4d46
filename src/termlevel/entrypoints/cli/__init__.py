"""Command-line interface for TERMLEVEL."""
