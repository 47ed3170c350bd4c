"""Command-line interface for cssbuilder."""
