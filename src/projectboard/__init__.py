"""ProjectBoard - project tracking over a single SQLite table."""

try:
    from importlib.metadata import version
    __version__ = version("projectboard")
except Exception:
    # Fallback if package metadata is not available
    __version__ = "0.1.0"
