"""Documentation style conformance checker for Markdown topic documents."""

__version__ = "0.1.0"
