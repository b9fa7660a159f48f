"""In-memory vehicle rental desk."""

__version__ = "0.1.0"
