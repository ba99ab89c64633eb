"""Exceptions raised while decoding or encoding Chemical JSON documents."""


class CjsonError(ValueError):
    """Base class for all Chemical JSON codec errors."""


class MalformedInputError(CjsonError):
    """Raised when the input text is not syntactically valid JSON."""


class FormatMismatchError(CjsonError):
    """Raised when a valid JSON document is not a Chemical JSON document."""


class SchemaError(CjsonError):
    """Raised when a required key is missing or a value has the wrong JSON type."""


class ConsistencyError(CjsonError):
    """Raised when related blocks of a document disagree with each other."""


class SerializationError(CjsonError):
    """Raised when a molecule cannot be encoded as strict JSON."""
