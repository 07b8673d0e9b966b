"""Directory module."""

from .handler import DirectoryHandler

directory_handler = DirectoryHandler()
