"""Turn-based grid combat simulator."""

__version__ = "0.1.0"
