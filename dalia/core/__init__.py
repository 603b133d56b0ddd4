"""Core functionality modules for dalia."""

__all__ = [
    "parser",
    "writers",
    "config",
    "expand",
]
