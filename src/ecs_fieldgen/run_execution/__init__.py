"""Run execution domain exports."""

from .generation_use_case import GenerationError, execute_code_generation_run, list_schema_fields
from .run_contracts import FieldListing, GenerationOutcome

__all__ = [
    "FieldListing",
    "GenerationOutcome",
    "GenerationError",
    "execute_code_generation_run",
    "list_schema_fields",
]
