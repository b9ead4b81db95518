"""Turn-based strategy game pieces: config loading, API client and client UI building blocks."""

__version__ = "0.0.1"