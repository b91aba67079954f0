"""Schema management errors."""


class SchemaError(Exception):
    """Raised for schema loading, flattening or assembly failures."""


class DefinitionLoadError(SchemaError):
    """Raised when a field-definition document cannot be read or decoded."""


class UnknownFieldTypeError(SchemaError):
    """Raised when a field declares a type keyword with no known target type."""


class SchemaInconsistencyError(SchemaError):
    """Raised when the assembled tree would break its structural invariants.

    Covers a dotted path defined both as a value and as a group while
    building, and a described group with no namespace while propagating
    descriptions.
    """
