"""In-memory authors and books served over GraphQL."""

__version__ = "0.1.0"
