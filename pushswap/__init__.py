"""Two-stack integer sorting with the push_swap operation set."""

__version__ = "1.0.0"
__all__ = ["stack", "parsing", "algorithm", "cli"]