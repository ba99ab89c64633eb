"""Command-line interfaces and other presentation layer components."""

from .cli.convert_cjson import main as convert_cjson_main

__all__ = [
    "convert_cjson_main",
]
