"""Main handler for Chemical JSON file operations."""

import logging
from typing import List, Optional, TextIO

from ..core.domain.interfaces.file_format import FileFormat
from ..core.domain.models.molecular_graph import MolecularGraph
from ..core.exceptions import CjsonError, MalformedInputError
from ..io.cjson_reader import CjsonReader
from ..io.cjson_writer import CjsonWriter, WriterConfig

logger = logging.getLogger(__name__)


class CjsonFormat(FileFormat):
    """
    Chemical JSON (``.cjson``) reader and writer.

    Reads fail on the first schema or consistency violation and report
    it through ``errors``. Writes succeed unless the molecule holds values
    that strict JSON cannot represent; data the format cannot carry is
    dropped and reported through ``errors`` as a warning.
    """

    def __init__(self, config: Optional[WriterConfig] = None):
        """
        Initialize the format.

        Args:
            config: Layout used when writing; defaults to a two-space indent
        """
        super().__init__()
        self.config = config or WriterConfig()

    def read(self, stream: TextIO, molecule: MolecularGraph) -> bool:
        self.clear_errors()
        reader = CjsonReader()
        try:
            reader.read(self._read_text(stream), molecule)
        except CjsonError as e:
            for warning in reader.warnings:
                self.append_error(warning)
            self.append_error(str(e))
            logger.error(f"Failed to read Chemical JSON: {e}")
            return False

        for warning in reader.warnings:
            self.append_error(warning)
        return True

    @staticmethod
    def _read_text(stream: TextIO) -> str:
        try:
            return stream.read()
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Error parsing JSON: input is not valid UTF-8 ({e})") from e

    def write(self, molecule: MolecularGraph, stream: TextIO) -> bool:
        self.clear_errors()
        writer = CjsonWriter(self.config)
        try:
            text = writer.write(molecule)
        except CjsonError as e:
            for warning in writer.warnings:
                self.append_error(warning)
            self.append_error(str(e))
            logger.error(f"Failed to write Chemical JSON: {e}")
            return False

        for warning in writer.warnings:
            self.append_error(warning)
        stream.write(text)
        return True

    def file_extensions(self) -> List[str]:
        return ["cjson"]

    def mime_types(self) -> List[str]:
        return ["chemical/x-cjson"]
