"""In-memory user directory REST service."""

__version__ = "1.0.0"
