"""scripture-spotlight - open Bible verses and publications in JW Library from a short reference."""

__version__ = "0.1.0"
