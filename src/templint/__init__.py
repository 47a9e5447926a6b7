"""templint: static checks for brace-delimited mail-merge templates."""

__version__ = "0.1.0"
