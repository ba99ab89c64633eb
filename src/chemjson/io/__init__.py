"""Chemical JSON reader and writer."""

from .cjson_reader import CjsonReader
from .cjson_writer import CjsonWriter, WriterConfig

__all__ = ["CjsonReader", "CjsonWriter", "WriterConfig"]
