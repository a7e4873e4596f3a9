"""Ingest people and their posts into an in-memory entity/relationship graph."""

__version__ = "0.1.0"
