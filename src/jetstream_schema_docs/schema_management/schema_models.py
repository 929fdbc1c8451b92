"""Provider schema entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Decoded `terraform providers schema -json` document.

    Provider entries stay raw until one is selected so that providers nobody
    asked about are never validated.
    """

    provider_schemas: Mapping[str, Any]


@dataclass(frozen=True)
class AttributeSchema:
    """One attribute of a resource block."""

    description: str
    type: Any
    optional: bool = False
    computed: bool = False


@dataclass(frozen=True)
class ResourceSchema:
    """Attributes of one resource type, in document order."""

    attributes: Mapping[str, AttributeSchema]


@dataclass(frozen=True)
class ProviderSchema:
    """Resource schemas published by a single provider."""

    name: str
    resource_schemas: Mapping[str, ResourceSchema]
