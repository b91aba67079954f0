"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generator run."""

    contents: str
    output_path: Path | None
    formatted: bool


@dataclass(frozen=True)
class FieldListing:
    """One assembled schema value as shown by ``list-fields``."""

    flat_name: str
    type_name: str
    description: str
