"""Schema decoding and provider projection service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .schema_models import AttributeSchema, ProviderSchema, ResourceSchema, SchemaDocument

logger = logging.getLogger(__name__)


class SchemaError(Exception):
    """Raised for schema decoding or shape failures."""


class MissingProviderError(SchemaError, LookupError):
    """Raised when the requested provider is absent from the document."""


class MissingResourceError(SchemaError, LookupError):
    """Raised when a resource schema lacks its expected path."""


class MalformedAttributeError(SchemaError):
    """Raised when an attribute entry lacks expected fields or has wrong types."""


def load_schema_document(content: str | bytes) -> SchemaDocument:
    """Decode provider schema JSON (text, or UTF-8 bytes) into a document."""
    try:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        root = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SchemaError(f"Invalid provider schema JSON: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError("Provider schema root must be an object.")
    provider_schemas = root.get("provider_schemas")
    if not isinstance(provider_schemas, Mapping):
        raise SchemaError("Provider schema document must define provider_schemas.")

    return SchemaDocument(provider_schemas=provider_schemas)


def read_provider_schema(document: SchemaDocument, provider_name: str) -> ProviderSchema:
    """Select one provider and project it onto typed resource schemas."""
    try:
        provider = document.provider_schemas[provider_name]
    except KeyError as exc:
        available = ", ".join(sorted(document.provider_schemas)) or "none"
        raise MissingProviderError(
            f"Provider '{provider_name}' not found in schema (available: {available})."
        ) from exc

    if not isinstance(provider, Mapping):
        raise MissingResourceError(f"Provider '{provider_name}' schema must be an object.")
    resource_schemas = provider.get("resource_schemas")
    if not isinstance(resource_schemas, Mapping):
        raise MissingResourceError(f"Provider '{provider_name}' does not define resource_schemas.")

    resources = {
        resource_name: _read_resource_schema(resource_name, definition)
        for resource_name, definition in resource_schemas.items()
    }
    logger.debug("provider %s defines %d resource schemas", provider_name, len(resources))
    return ProviderSchema(name=provider_name, resource_schemas=resources)


def _read_resource_schema(resource_name: str, definition: Any) -> ResourceSchema:
    if not isinstance(definition, Mapping):
        raise MissingResourceError(f"Resource '{resource_name}' schema must be an object.")
    block = definition.get("block")
    if not isinstance(block, Mapping):
        raise MissingResourceError(f"Resource '{resource_name}' does not define a block.")

    # Terraform drops the key entirely for blocks without attributes.
    attributes = block.get("attributes", {})
    if not isinstance(attributes, Mapping):
        raise MissingResourceError(
            f"Resource '{resource_name}' block attributes must be an object."
        )

    return ResourceSchema(
        attributes={
            attribute_name: _read_attribute_schema(resource_name, attribute_name, entry)
            for attribute_name, entry in attributes.items()
        }
    )


def _read_attribute_schema(resource_name: str, attribute_name: str, entry: Any) -> AttributeSchema:
    label = f"{resource_name}.{attribute_name}"
    if not isinstance(entry, Mapping):
        raise MalformedAttributeError(f"Attribute '{label}' schema must be an object.")
    if "type" not in entry:
        raise MalformedAttributeError(f"Attribute '{label}' does not define a type.")

    description = entry.get("description", "")
    if not isinstance(description, str):
        raise MalformedAttributeError(f"Attribute '{label}' description must be a string.")

    return AttributeSchema(
        description=description,
        type=entry["type"],
        optional=_optional_flag(entry, "optional", label),
        computed=_optional_flag(entry, "computed", label),
    )


def _optional_flag(entry: Mapping[str, Any], key: str, label: str) -> bool:
    value = entry.get(key, False)
    if not isinstance(value, bool):
        raise MalformedAttributeError(f"Attribute '{label}' {key} must be a boolean.")
    return value
