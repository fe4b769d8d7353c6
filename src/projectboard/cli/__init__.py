"""Command-line interface for ProjectBoard."""
