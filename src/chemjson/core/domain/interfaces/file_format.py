"""Abstract base class for chemical file formats."""

from abc import ABC, abstractmethod
import io
import logging
from pathlib import Path
from typing import List, TextIO, Union

from ..models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


class FileFormat(ABC):
    """
    Interface shared by readers/writers of molecular file formats.

    Diagnostics from the most recent read or write are collected in
    ``errors``; the list is cleared at the start of every call.
    """

    def __init__(self):
        self._errors: List[str] = []

    @property
    def errors(self) -> List[str]:
        """Messages recorded by the most recent read or write."""
        return list(self._errors)

    def append_error(self, message: str) -> None:
        self._errors.append(message)

    def clear_errors(self) -> None:
        self._errors = []

    @abstractmethod
    def read(self, stream: TextIO, molecule: MolecularGraph) -> bool:
        """
        Populate a molecule from a text stream.

        Args:
            stream: Readable text stream
            molecule: Molecule to populate

        Returns:
            True on success, False if the document was rejected
        """
        pass

    @abstractmethod
    def write(self, molecule: MolecularGraph, stream: TextIO) -> bool:
        """
        Serialize a molecule to a text stream.

        Args:
            molecule: Molecule to serialize
            stream: Writable text stream

        Returns:
            True on success
        """
        pass

    @abstractmethod
    def file_extensions(self) -> List[str]:
        """File extensions handled by this format, without the leading dot."""
        pass

    @abstractmethod
    def mime_types(self) -> List[str]:
        """MIME types handled by this format."""
        pass

    def read_string(self, text: str, molecule: MolecularGraph) -> bool:
        """Populate a molecule from a string."""
        return self.read(io.StringIO(text), molecule)

    def write_string(self, molecule: MolecularGraph) -> str:
        """Serialize a molecule to a string, returning an empty string on failure."""
        buf = io.StringIO()
        if not self.write(molecule, buf):
            return ""
        return buf.getvalue()

    def read_file(self, path: Union[str, Path], molecule: MolecularGraph) -> bool:
        """Populate a molecule from a UTF-8 file."""
        path = Path(path)
        logger.debug(f"Reading {path}")
        with open(path, "r", encoding="utf-8") as f:
            return self.read(f, molecule)

    def write_file(self, molecule: MolecularGraph, path: Union[str, Path]) -> bool:
        """
        Serialize a molecule to a UTF-8 file.

        The file is only created when serialization succeeds.
        """
        path = Path(path)
        text = self.write_string(molecule)
        if not text:
            return False
        path.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote {path}")
        return True
