"""Credential resolution and error sanitization for Azure Data Explorer (Kusto) clients."""

__version__ = "0.1.0"
