"""Markdown attribute reference rendering."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from jetstream_schema_docs.schema_management import (
    AttributeSchema,
    ProviderSchema,
    ResourceSchema,
    SchemaDocument,
    read_provider_schema,
)

DEFAULT_PROVIDER_NAME = "jetstream"
ATTRIBUTE_REFERENCE_HEADING = "### Attribute Reference"

logger = logging.getLogger(__name__)


def render(document: SchemaDocument, provider_name: str = DEFAULT_PROVIDER_NAME) -> list[str]:
    """Return the attribute reference lines for every resource of one provider."""
    return list(iter_reference_lines(document, provider_name))


def iter_reference_lines(
    document: SchemaDocument, provider_name: str = DEFAULT_PROVIDER_NAME
) -> Iterator[str]:
    """Return a lazy iterator over reference lines, in resource name order.

    The provider is looked up and validated eagerly: a missing provider or a
    malformed attribute raises here, before any line is produced.
    """
    provider = read_provider_schema(document, provider_name)
    return _provider_lines(provider)


def _provider_lines(provider: ProviderSchema) -> Iterator[str]:
    for resource_name, resource in sorted(provider.resource_schemas.items()):
        yield from _resource_section(resource_name, resource)


def _resource_section(resource_name: str, resource: ResourceSchema) -> Iterator[str]:
    yield f"## {resource_name}"
    yield ""
    yield ATTRIBUTE_REFERENCE_HEADING
    yield ""

    # Document order, never re-sorted.
    for attribute_name, attribute in resource.attributes.items():
        if attribute.computed:
            logger.debug("skipping computed attribute %s.%s", resource_name, attribute_name)
            continue
        yield format_attribute_line(attribute_name, attribute)

    yield ""


def format_attribute_line(attribute_name: str, attribute: AttributeSchema) -> str:
    """Render one bullet, e.g. `` * `name` - (optional) Name of thing (string)``."""
    description = f"{attribute.description} ({format_attribute_type(attribute.type)})"
    if attribute.optional:
        description = f"(optional) {description}"
    return f" * `{attribute_name}` - {description}"


def format_attribute_type(attribute_type: Any) -> str:
    """Return a type as text; composite types keep their JSON form."""
    if isinstance(attribute_type, str):
        return attribute_type
    return json.dumps(attribute_type)
