"""Parsing for a small interactive shell: tokens, quotes, pipelines, redirections and here-documents."""

__version__ = "0.1.0"