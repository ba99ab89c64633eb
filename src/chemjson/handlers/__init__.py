"""File format handlers."""

from .cjson_handler import CjsonFormat

__all__ = ["CjsonFormat"]
