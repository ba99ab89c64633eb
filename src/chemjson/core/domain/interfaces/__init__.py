"""Domain interfaces."""

from .file_format import FileFormat

__all__ = ["FileFormat"]
