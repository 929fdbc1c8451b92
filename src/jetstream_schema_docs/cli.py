"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from jetstream_schema_docs.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from jetstream_schema_docs.reference_rendering import iter_reference_lines
from jetstream_schema_docs.schema_management import SchemaError, load_schema_document

STDIO_PATH = "-"

logger = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="jetstream-schema-docs")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Terraform provider schema to Markdown attribute reference."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
        logging.getLogger("jetstream_schema_docs").setLevel(logging.DEBUG)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.option(
    "--input",
    "input_path",
    required=False,
    type=click.Path(path_type=str, allow_dash=True),
    help="Provider schema JSON from `terraform providers schema -json` (default: stdin)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str, allow_dash=True),
    help="Markdown file to write (default: stdout)",
)
@click.option(
    "--provider",
    "provider",
    required=False,
    help="Provider key under provider_schemas (default: jetstream)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON settings file",
)
def render_reference(
    input_path: str | None,
    output_path: str | None,
    provider: str | None,
    config_path: str | None,
) -> None:
    """Write the attribute reference for every resource of the provider."""
    try:
        configuration = (
            load_configuration(config_path) if config_path else Configuration(path=None)
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    provider_name = provider or configuration.provider
    source = input_path or _optional_str(configuration.input_path) or STDIO_PATH
    destination = output_path or _optional_str(configuration.output_path) or STDIO_PATH
    logger.debug("rendering provider %s from %s to %s", provider_name, source, destination)

    try:
        document = load_schema_document(_read_schema_bytes(source))
        lines = iter_reference_lines(document, provider_name)
        with click.open_file(destination, "w", encoding="utf-8") as stream:
            for line in lines:
                stream.write(f"{line}\n")
    except (SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _read_schema_bytes(source: str) -> bytes:
    with click.open_file(source, "rb") as stream:
        return stream.read()


def _optional_str(path: Path | None) -> str | None:
    return str(path) if path is not None else None


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
