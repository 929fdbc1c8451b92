"""Schema management exports."""

from .schema_models import AttributeSchema, ProviderSchema, ResourceSchema, SchemaDocument
from .schema_projection import (
    MalformedAttributeError,
    MissingProviderError,
    MissingResourceError,
    SchemaError,
    load_schema_document,
    read_provider_schema,
)

__all__ = [
    "AttributeSchema",
    "ProviderSchema",
    "ResourceSchema",
    "SchemaDocument",
    "SchemaError",
    "MissingProviderError",
    "MissingResourceError",
    "MalformedAttributeError",
    "load_schema_document",
    "read_provider_schema",
]
