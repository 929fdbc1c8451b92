"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jetstream_schema_docs.reference_rendering import DEFAULT_PROVIDER_NAME


@dataclass(frozen=True)
class Configuration:
    """Documentation run settings."""

    path: Path | None
    provider: str = DEFAULT_PROVIDER_NAME
    input_path: Path | None = None
    output_path: Path | None = None
