"""REST API for ProjectBoard."""
