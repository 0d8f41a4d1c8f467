"""bitctl — inspect and manipulate a 64-bit value from the command line."""

__version__ = "0.1.0"
