"""Chemical JSON (.cjson) reader and writer for molecular graphs."""

from .core.domain.models import (
    Atom,
    Bond,
    BasisSet,
    GaussianSet,
    SlaterSet,
    ScfType,
    UnitCell,
    MolecularGraph,
)
from .core.exceptions import (
    CjsonError,
    MalformedInputError,
    FormatMismatchError,
    SchemaError,
    ConsistencyError,
    SerializationError,
)
from .handlers.cjson_handler import CjsonFormat
from .io.cjson_writer import WriterConfig

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Bond",
    "BasisSet",
    "GaussianSet",
    "SlaterSet",
    "ScfType",
    "UnitCell",
    "MolecularGraph",
    "CjsonError",
    "MalformedInputError",
    "FormatMismatchError",
    "SchemaError",
    "ConsistencyError",
    "SerializationError",
    "CjsonFormat",
    "WriterConfig",
]
