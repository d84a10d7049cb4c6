"""JSON card engines: decomposition, previews and document storage."""

__version__ = "0.1.0"
