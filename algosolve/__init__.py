"""Solutions to classic algorithm problems, grouped by theme."""

__version__ = "0.1.0"