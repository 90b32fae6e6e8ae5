"""GoMate - Swiss public-transport travel companion."""

__version__ = "0.1.0"
