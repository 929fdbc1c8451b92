"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-docs.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Settings for jetstream-schema-docs.
# Relative paths are resolved against the directory holding this file.
# Command line options override every value set here.

# Key of the provider under provider_schemas in the schema document.
provider: "jetstream"

# Schema JSON written by `terraform providers schema -json`; stdin when unset.
# input: "schema.json"

# Markdown destination; stdout when unset.
# output: "docs/attributes.md"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
