"""Sample provider schema rendering tests."""

from __future__ import annotations

from pathlib import Path

from jetstream_schema_docs.reference_rendering import render
from jetstream_schema_docs.schema_management import load_schema_document


def _samples_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


def test_sample_schema_renders_expected_reference() -> None:
    schema_text = (_samples_dir() / "jetstream-provider-schema.json").read_text(encoding="utf-8")
    expected = (_samples_dir() / "jetstream-attribute-reference.md").read_text(encoding="utf-8")

    lines = render(load_schema_document(schema_text))

    assert "\n".join(lines) + "\n" == expected


def test_sample_schema_ignores_other_providers() -> None:
    schema_text = (_samples_dir() / "jetstream-provider-schema.json").read_text(encoding="utf-8")

    lines = render(load_schema_document(schema_text))

    assert "## null_resource" not in lines
    assert [line for line in lines if line.startswith("## ")] == [
        "## jetstream_consumer",
        "## jetstream_kv_bucket",
        "## jetstream_kv_entry",
        "## jetstream_stream",
    ]


def test_sample_schema_skips_nested_block_types() -> None:
    schema_text = (_samples_dir() / "jetstream-provider-schema.json").read_text(encoding="utf-8")

    lines = render(load_schema_document(schema_text))

    assert " * `name` - The name of the source Stream (string)" not in lines
