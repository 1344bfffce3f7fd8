"""Find groups of byte-identical files in a directory tree."""

__version__ = "0.1.0"
