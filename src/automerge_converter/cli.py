"""Command-line interface for the Automerge converter."""

import json
import logging
import sys
from typing import Optional

import click

from . import __version__
from .converter import AutomergeConverter
from .error_handler import ErrorHandler
from .parser import JSONParser
from .types import ConversionError, ConversionOptions


logger = logging.getLogger("automerge_converter")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(error: Exception, error_handler: ErrorHandler) -> None:
    """Report an error on stderr and exit with status 1."""
    response = error_handler.handle_conversion_error(error)
    click.echo(f"❌ Error: {error}", err=True)
    click.echo(f"   • {response.suggested_action}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def main():
    """Automerge Converter - Convert between JSON and Automerge binary documents."""
    pass


@main.command()
@click.option('--input', '-i', 'input_file', type=click.Path(dir_okay=False),
              help='Input JSON file (default: stdin)')
@click.option('--output', '-o', 'output_file', type=click.Path(dir_okay=False),
              help='Output binary file (default: stdout)')
@click.option('--actor', '-a', help='Actor ID (hex) for the document')
@click.option('--validate', '-v', is_flag=True, help='Validate JSON before conversion')
@click.option('--test', '-t', 'run_test', is_flag=True, help='Test repo compatibility after conversion')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
def json2bin(input_file: Optional[str], output_file: Optional[str], actor: Optional[str],
             validate: bool, run_test: bool, verbose: bool):
    """Convert JSON (from stdin or file) to Automerge binary."""
    _configure_logging(verbose)
    error_handler = ErrorHandler(logger)
    converter = AutomergeConverter(logger=logger)
    options = ConversionOptions(actor=actor, validate_json=validate)

    try:
        if input_file:
            json_text = converter.file_reader.read_text(input_file)
        else:
            json_text = sys.stdin.buffer.read().decode('utf-8')

        data = JSONParser(error_handler, logger).parse(json_text)
        binary = converter.json_to_automerge(data, options)

        if output_file:
            converter.file_writer.write_bytes(output_file, binary)
            click.echo(f"✓ Converted JSON to Automerge binary ({len(binary)} bytes) -> {output_file}", err=True)
        else:
            stdout = sys.stdout.buffer
            stdout.write(binary)
            stdout.flush()

        if run_test:
            compatible = converter.check_repo_compatibility(binary)
            click.echo(f"✓ Repo compatibility test: {'PASS' if compatible else 'FAIL'}", err=True)

    except (ConversionError, OSError) as e:
        _fail(e, error_handler)


@main.command()
@click.option('--input', '-i', 'input_file', type=click.Path(dir_okay=False),
              help='Input Automerge binary file (default: stdin)')
@click.option('--output', '-o', 'output_file', type=click.Path(dir_okay=False),
              help='Output JSON file (default: stdout)')
@click.option('--actor', '-a', help='Actor ID (hex) for the loaded document')
@click.option('--test', '-t', 'run_test', is_flag=True, help='Test repo compatibility of the input')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
def bin2json(input_file: Optional[str], output_file: Optional[str], actor: Optional[str],
             run_test: bool, verbose: bool):
    """Convert Automerge binary (from stdin or file) to JSON."""
    _configure_logging(verbose)
    error_handler = ErrorHandler(logger)
    converter = AutomergeConverter(logger=logger)
    options = ConversionOptions(actor=actor)

    try:
        if input_file:
            binary = converter.file_reader.read_bytes(input_file)
        else:
            binary = sys.stdin.buffer.read()

        data = converter.automerge_to_json(binary, options)
        json_text = json.dumps(data, indent=2, ensure_ascii=False)

        if output_file:
            converter.file_writer.write_text(output_file, json_text)
            click.echo(f"✓ Converted Automerge binary to JSON -> {output_file}", err=True)
        else:
            click.echo(json_text)

        if run_test:
            compatible = converter.check_repo_compatibility(binary)
            click.echo(f"✓ Repo compatibility test: {'PASS' if compatible else 'FAIL'}", err=True)

    except (ConversionError, OSError) as e:
        _fail(e, error_handler)


main.add_command(json2bin, name="json-to-binary")
main.add_command(bin2json, name="binary-to-json")


if __name__ == '__main__':
    main()
