"""Gather the text files of a directory into one document, with a file tree and token estimate."""

__version__ = "0.1.0"
__all__ = ["cli", "matching", "processor", "tokens"]