"""Lexico - text document ingestion service."""

__version__ = "0.1.0"
