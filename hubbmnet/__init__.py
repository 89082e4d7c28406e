"""Command-driven simulator of layered frame routing between network clients."""

__version__ = "0.1.0"
__all__ = ["__version__"]