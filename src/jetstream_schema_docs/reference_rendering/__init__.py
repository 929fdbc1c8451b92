"""Reference rendering exports."""

from .attribute_reference import (
    ATTRIBUTE_REFERENCE_HEADING,
    DEFAULT_PROVIDER_NAME,
    format_attribute_line,
    format_attribute_type,
    iter_reference_lines,
    render,
)

__all__ = [
    "ATTRIBUTE_REFERENCE_HEADING",
    "DEFAULT_PROVIDER_NAME",
    "format_attribute_line",
    "format_attribute_type",
    "iter_reference_lines",
    "render",
]
