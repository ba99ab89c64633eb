"""Core domain models, interfaces and services for the Chemical JSON codec."""

from .domain.models.molecular_graph import MolecularGraph
from .domain.models.unit_cell import UnitCell
from .domain.models.basis_set import BasisSet, GaussianSet, SlaterSet, ScfType
from .domain.interfaces.file_format import FileFormat
from .exceptions import (
    CjsonError,
    MalformedInputError,
    FormatMismatchError,
    SchemaError,
    ConsistencyError,
    SerializationError,
)

__all__ = [
    "MolecularGraph",
    "UnitCell",
    "BasisSet",
    "GaussianSet",
    "SlaterSet",
    "ScfType",
    "FileFormat",
    "CjsonError",
    "MalformedInputError",
    "FormatMismatchError",
    "SchemaError",
    "ConsistencyError",
    "SerializationError",
]
