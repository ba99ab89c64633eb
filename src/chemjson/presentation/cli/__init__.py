"""Command-line interface modules."""

from .convert_cjson import main as convert_cjson_main

__all__ = [
    "convert_cjson_main",
]
