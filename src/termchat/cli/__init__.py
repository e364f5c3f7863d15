"""Command-line interface for termchat."""
