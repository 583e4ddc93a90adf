"""Password-protected task board service."""

__version__ = "1.0.0"
