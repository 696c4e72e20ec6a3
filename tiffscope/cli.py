"""CLI interface for tiffscope -- dump and extract subcommands."""

import dataclasses
import json
import logging
import sys
from fractions import Fraction
from pathlib import Path

import click

import tiffscope
from tiffscope.config import DecodeConfig
from tiffscope.decoder import decode_stream
from tiffscope.errors import TiffError
from tiffscope.jpeg import decode_jpeg_stream, is_jpeg
from tiffscope.log import (
    cli_bold,
    cli_dim,
    cli_error,
    cli_header,
    cli_separator,
    cli_success,
    cli_tag,
    cli_warning,
    set_color_enabled,
)
from tiffscope.models import IFD, GeoKeyDirectory
from tiffscope.query import extract as extract_tags
from tiffscope.query import resolve_geo_keys, to_dict

# Arrays longer than this are abbreviated in text output
_PREVIEW_ITEMS = 8
_PREVIEW_BYTES = 16


def format_value(value) -> str:
    """Short human-readable rendering of a decoded tag value."""
    if isinstance(value, Fraction):
        return f'{value.numerator}/{value.denominator}'
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value[:_PREVIEW_BYTES]).hex(' ')
        if len(value) > _PREVIEW_BYTES:
            text += f' ... ({len(value)} bytes)'
        return text
    if isinstance(value, frozenset):
        return '{' + ', '.join(sorted(str(v) for v in value)) + '}'
    if isinstance(value, tuple):
        items = ', '.join(format_value(v) for v in value[:_PREVIEW_ITEMS])
        if len(value) > _PREVIEW_ITEMS:
            items += f', ... ({len(value)} values)'
        return f'({items})'
    if isinstance(value, GeoKeyDirectory):
        return f'{len(value.keys)} GeoKeys (version {value.header[0]})'
    if isinstance(value, str):
        return repr(value)
    return str(value)


def _parse_tag_arg(text: str):
    """Tag argument: a symbolic name, a decimal code or a 0x-prefixed code."""
    try:
        return int(text, 0)
    except ValueError:
        return text


def _load(path, start, end, config):
    """Decode a TIFF file, or the Exif block of a JPEG when no offsets are given."""
    with open(path, 'rb') as f:
        if start is None and end is None and is_jpeg(f):
            return decode_jpeg_stream(f, config)
        return decode_stream(f, start or 0, end, config)


def _echo_ifd(ifd: IFD, indent: int):
    pad = '  ' * indent
    for tag in ifd.tags:
        kind = cli_dim(f'{tag.type}[{tag.count}]')
        if isinstance(tag.value, IFD):
            click.echo(f'{pad}{cli_tag(str(tag.id))} {kind} '
                       f'{cli_dim(f"-> offset {tag.value.offset}")}')
            _echo_ifd(tag.value, indent + 1)
        else:
            click.echo(f'{pad}{cli_tag(str(tag.id))} {kind} = {format_value(tag.value)}')

    geo_keys = resolve_geo_keys(ifd)
    if geo_keys:
        click.echo(f'{pad}{cli_bold("GeoKeys:")}')
        for key, value in geo_keys.items():
            click.echo(f'{pad}  {cli_tag(str(key))} = {format_value(value)}')


@click.group()
@click.version_option(version=tiffscope.__version__, prog_name='tiffscope')
@click.option('--color/--no-color', default=None,
              help='Force colored output on or off (default: auto).')
def main(color):
    """tiffscope -- TIFF, Exif and GeoTIFF metadata decoder.

    Reads the IFD chain of a TIFF file (or the Exif block of a JPEG) and
    prints its tags, descending into Exif, GPS and Interoperability
    sub-directories.
    """
    if color is not None:
        set_color_enabled(color)


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--start', type=int, default=None,
              help='Absolute offset of the TIFF header inside the file.')
@click.option('--end', type=int, default=None,
              help='Absolute end (exclusive) of the TIFF region.')
@click.option('--json-out', type=click.Path(), help='Write the tag tree as JSON to file.')
@click.option('--raw', is_flag=True, help='Skip enumerated/bitfield/GeoKey interpretation.')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON file with decoder settings.')
@click.option('--verbose', '-v', is_flag=True, help='Log directory reads and value fetches.')
def dump(path, start, end, json_out, raw, config_path, verbose):
    """Print every IFD and tag in PATH."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    filepath = Path(path)
    try:
        config = DecodeConfig.from_json(config_path) if config_path else DecodeConfig.default()
        if raw:
            config = dataclasses.replace(config, interpret_values=False)
        tree = _load(filepath, start, end, config)
    except (TiffError, EOFError, OSError, ValueError) as e:
        click.echo(cli_error(f'Error: {filepath.name}: {e}'), err=True)
        sys.exit(1)

    if json_out:
        with open(json_out, 'w') as f:
            json.dump(to_dict(tree), f, indent=2)
        click.echo(cli_success(f'Tag tree written to {json_out}'))
        return

    click.echo(f'File: {filepath.name}')
    if not tree:
        click.echo(cli_warning('No IFDs (first IFD offset is 0)'))
    for index, ifd in enumerate(tree):
        click.echo(cli_separator())
        click.echo(cli_header(f'IFD{index}') +
                   cli_dim(f' (offset {ifd.offset}, {len(ifd)} tags, next {ifd.next})'))
        _echo_ifd(ifd, 1)


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.argument('tags', nargs=-1, required=True)
@click.option('--start', type=int, default=None,
              help='Absolute offset of the TIFF header inside the file.')
@click.option('--end', type=int, default=None,
              help='Absolute end (exclusive) of the TIFF region.')
def extract(path, tags, start, end):
    """Print the values of TAGS found anywhere in PATH.

    TAGS are tag names (ImageWidth, ExifIFD) or numeric codes (256, 0x8769).
    Naming a sub-directory pointer prints every tag inside it.
    """
    filepath = Path(path)
    try:
        tree = _load(filepath, start, end, DecodeConfig.default())
    except (TiffError, EOFError, OSError) as e:
        click.echo(cli_error(f'Error: {filepath.name}: {e}'), err=True)
        sys.exit(1)

    pairs = extract_tags(tree, [_parse_tag_arg(t) for t in tags])
    if not pairs:
        click.echo(cli_warning('No matching tags'), err=True)
        return
    for tag_id, value in pairs:
        click.echo(f'{cli_tag(str(tag_id))} = {format_value(value)}')


if __name__ == '__main__':
    main()
