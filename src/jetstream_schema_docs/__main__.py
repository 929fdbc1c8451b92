"""Module entry point for `python -m jetstream_schema_docs`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
