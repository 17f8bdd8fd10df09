"""Todo CRUD service backed by a single SQLite table."""

__version__ = "0.1.0"
