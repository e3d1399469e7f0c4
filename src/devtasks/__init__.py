"""Local developer task runner: window screenshots, docs, and logged runs."""

__version__ = "0.1.0"
