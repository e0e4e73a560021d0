"""Helpers for generating API clients: options, naming, descriptors, REST parameters, status codes, metadata and Markdown."""

__version__ = "0.1.0"

__all__ = [
    "descriptors",
    "markdown",
    "metadata",
    "naming",
    "options",
    "rest",
    "rest_query",
    "rest_status",
]