"""Locate the Exif TIFF block inside a JPEG stream.

Exif metadata in a JPEG is a complete little TIFF file stored in an APP1
segment right after the ``Exif\\0\\0`` identifier. Its pointers are relative
to the TIFF signature, so decoding it is a matter of passing the right
``start``/``end`` to the TIFF decoder.
"""

import io
import logging
import os
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple

from tiffscope.config import DecodeConfig
from tiffscope.decoder import Source, decode_stream
from tiffscope.errors import ExifNotFoundError, NotAJpegError
from tiffscope.models import IFD
from tiffscope.tiff.reader import read_exact

logger = logging.getLogger(__name__)

JPEG_SOI = b'\xff\xd8'
EXIF_IDENTIFIER = b'Exif\x00\x00'

_APP1 = 0xE1
_SOS = 0xDA
_EOI = 0xD9
# Markers without a length field: TEM and RST0-RST7
_STANDALONE_MARKERS = {0x01} | set(range(0xD0, 0xD8))


def is_jpeg(stream: BinaryIO) -> bool:
    """Check for the SOI marker at the current position without consuming it."""
    pos = stream.tell()
    try:
        return stream.read(2) == JPEG_SOI
    finally:
        stream.seek(pos)


def _read_marker(stream: BinaryIO) -> int:
    prefix = read_exact(stream, 1)
    if prefix != b'\xff':
        raise ExifNotFoundError(
            f'Corrupt JPEG marker at offset {stream.tell() - 1}')
    marker = read_exact(stream, 1)[0]
    # Any number of 0xFF fill bytes may precede the marker code
    while marker == 0xFF:
        marker = read_exact(stream, 1)[0]
    return marker


def find_exif_region(stream: BinaryIO) -> Tuple[int, int]:
    """Return absolute ``(start, end)`` of the Exif TIFF block.

    The stream must be positioned at the JPEG SOI marker. Segments are
    walked until the first APP1 segment carrying the Exif identifier;
    scanning stops at start-of-scan since metadata never follows image data.
    """
    if stream.read(2) != JPEG_SOI:
        raise NotAJpegError('Missing JPEG SOI marker')

    while True:
        marker = _read_marker(stream)
        if marker in _STANDALONE_MARKERS:
            continue
        if marker in (_SOS, _EOI):
            raise ExifNotFoundError('No APP1 Exif segment before image data')

        length = int.from_bytes(read_exact(stream, 2), 'big')
        if length < 2:
            raise ExifNotFoundError(f'Invalid JPEG segment length {length}')
        payload_start = stream.tell()
        payload_end = payload_start + length - 2

        if marker == _APP1 and length - 2 >= len(EXIF_IDENTIFIER):
            if read_exact(stream, len(EXIF_IDENTIFIER)) == EXIF_IDENTIFIER:
                start = payload_start + len(EXIF_IDENTIFIER)
                logger.debug('Exif block at %d-%d', start, payload_end)
                return start, payload_end

        stream.seek(payload_end)


def decode_jpeg_stream(stream: BinaryIO,
                       config: Optional[DecodeConfig] = None) -> List[IFD]:
    start, end = find_exif_region(stream)
    return decode_stream(stream, start, end, config)


def decode_jpeg_exif(source: Source,
                     config: Optional[DecodeConfig] = None) -> List[IFD]:
    """Decode the Exif block of a JPEG given as a path, bytes or stream."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return decode_jpeg_stream(io.BytesIO(bytes(source)), config)
    if isinstance(source, (str, Path, os.PathLike)):
        with open(source, 'rb') as f:
            return decode_jpeg_stream(f, config)
    return decode_jpeg_stream(source, config)
