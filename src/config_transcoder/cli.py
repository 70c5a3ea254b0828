"""Command-line interface for the Config Transcoder."""

import asyncio
import logging
import sys
from pathlib import Path

import click

from .flatten import Flattener
from .keypath import IndexSegment, decode_path
from .router import detect_format, supported_output_formats
from .transcoder import ConfigTranscoder
from .types import ConvertOptions, FormatTag, TranscodeError

OUTPUT_FORMATS = ["yaml", "yml", "properties", "json"]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@click.group()
@click.version_option(version="1.0.0")
def main():
    """Config Transcoder - Convert configuration files between YAML, properties and JSON."""
    pass


@main.command()
@click.argument('input_files', nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option('--to', '-t', 'output_format', required=True,
              type=click.Choice(OUTPUT_FORMATS, case_sensitive=False), help='Output format')
@click.option('--output', '-o', default='./output', help='Output directory (default: ./output)')
@click.option('--json-indent', default=2, show_default=True, help='JSON indentation, 0 for compact output')
@click.option('--sort-keys', is_flag=True, help='Sort mapping keys in YAML output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def convert(input_files, output_format: str, output: str, json_indent: int, sort_keys: bool, verbose: bool):
    """Convert configuration files to another format."""
    _configure_logging(verbose)
    click.echo(f"Converting {len(input_files)} file(s) to {output_format.lower()} in {output}...")

    with ConfigTranscoder(json_indent=json_indent or None, yaml_sort_keys=sort_keys) as transcoder:
        results = asyncio.run(transcoder.convert_files(
            [str(path) for path in input_files],
            output,
            ConvertOptions(output_format=output_format)
        ))

    failures = 0
    for path, result in zip(input_files, results):
        if result.success:
            click.echo(f"✅ {path} -> {result.output_path}")
        else:
            failures += 1
            click.echo(f"❌ {path}: {result.error}")

    if failures:
        click.echo(f"{failures} of {len(results)} conversion(s) failed")
        sys.exit(1)


@main.command()
@click.argument('input_file', type=click.Path(path_type=Path))
def formats(input_file: Path):
    """List the formats a configuration file can be converted to."""
    targets = supported_output_formats(input_file)
    if not targets:
        click.echo(f"❌ {input_file} is not a supported configuration file")
        sys.exit(1)
    for target in targets:
        click.echo(target)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--segments', is_flag=True, help='Show each key as decoded path segments')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def flatten(input_file: Path, segments: bool, verbose: bool):
    """Print the flat key=value entries of a YAML or JSON file."""
    _configure_logging(verbose)
    source = detect_format(input_file)
    if source not in (FormatTag.YAML, FormatTag.JSON):
        click.echo(f"❌ Flattening needs a YAML or JSON file, got {input_file}")
        sys.exit(1)

    transcoder = ConfigTranscoder(enable_parallel_processing=False)
    try:
        text = transcoder.file_reader.read_text(input_file)
        tree = transcoder.router.codecs[source].parse(text)
    except TranscodeError as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)

    for entry in Flattener().flatten(tree):
        if segments:
            parts = [
                f"[{segment.index}]" if isinstance(segment, IndexSegment) else segment.name
                for segment in decode_path(entry.key)
            ]
            click.echo(f"{' / '.join(parts)} = {entry.value}")
        else:
            click.echo(f"{entry.key}={entry.value}")


if __name__ == '__main__':
    main()
