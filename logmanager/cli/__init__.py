"""Command-line interface for LogManager."""
