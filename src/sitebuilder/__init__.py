"""Static page assembler for the portfolio site."""

__version__ = "0.1.0"
