"""A command-line todo list kept in a CSV file."""

__version__ = "0.1.0"
__all__ = ["__version__"]