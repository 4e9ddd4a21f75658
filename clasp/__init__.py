"""Command-line argument specifications and the string helpers used to describe them."""

__version__ = "0.1.0"
__all__ = ["specs", "strings"]