"""Shared test fixtures -- synthetic TIFF and Exif JPEG generators."""

import io
import struct
from fractions import Fraction

import pytest

# struct format per TIFF type code (rationals are packed as two of these)
_FORMATS = {
    1: 'B', 2: 'B', 3: 'H', 4: 'I', 5: 'I', 6: 'b',
    7: 'B', 8: 'h', 9: 'i', 10: 'i', 11: 'f', 12: 'd',
}


class SubIFD:
    """Marker value: lay out ``entries`` as a nested directory and store its offset."""

    def __init__(self, entries):
        self.entries = entries


def encode_value(type_id, value, endian='<'):
    """Encode a Python value as the raw bytes of a TIFF tag value.

    bytes pass through; str becomes NUL-terminated ASCII; ints, floats and
    Fractions (or lists of them) are packed per ``type_id``.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode('ascii') + b'\x00'
    fmt = endian + _FORMATS[type_id]
    if type_id in (5, 10):
        # A (numerator, denominator) pair allows writing a zero denominator
        if isinstance(value, (Fraction, tuple)):
            value = [value]
        out = b''
        for item in value:
            if isinstance(item, Fraction):
                item = (item.numerator, item.denominator)
            out += struct.pack(fmt, item[0]) + struct.pack(fmt, item[1])
        return out
    items = value if isinstance(value, (list, tuple)) else [value]
    return b''.join(struct.pack(fmt, item) for item in items)


def _pad(data):
    return data + b'\x00' if len(data) % 2 else data


def layout_ifd(entries, offset, endian='<', next_ifd=0):
    """Serialize one IFD located at logical ``offset``.

    Out-of-line values and nested SubIFDs are placed contiguously after the
    directory, each padded to an even length.

    Args:
        entries: List of (tag_id, type_id, count, value) tuples.
    """
    data_start = offset + 2 + 12 * len(entries) + 4
    records = b''
    tail = b''
    for tag_id, type_id, count, value in entries:
        records += struct.pack(endian + 'HHI', tag_id, type_id, count)
        if isinstance(value, SubIFD):
            position = data_start + len(tail)
            tail += layout_ifd(value.entries, position, endian)
            records += struct.pack(endian + 'I', position)
            continue
        raw = encode_value(type_id, value, endian)
        if len(raw) <= 4:
            records += raw.ljust(4, b'\x00')
        else:
            records += struct.pack(endian + 'I', data_start + len(tail))
            tail += _pad(raw)
    return (struct.pack(endian + 'H', len(entries)) + records +
            struct.pack(endian + 'I', next_ifd) + tail)


def tiff_header(endian='<', first_ifd=8):
    bo = b'II' if endian == '<' else b'MM'
    return bo + struct.pack(endian + 'HI', 42, first_ifd)


def build_tiff(entries, endian='<', next_ifd=0, prefix=b'', suffix=b''):
    """Build a single-IFD TIFF in memory.

    Args:
        entries: List of (tag_id, type_id, count, value) tuples.
        endian: '<' for little-endian, '>' for big-endian.
        next_ifd: Raw next-IFD pointer to store (0 ends the chain).
        prefix: Bytes placed before the header (embedded TIFF); pointers
            stay relative to the header.
        suffix: Bytes appended after everything else.

    Returns:
        bytes: Complete TIFF content.
    """
    return prefix + tiff_header(endian) + layout_ifd(entries, 8, endian, next_ifd) + suffix


def build_tiff_multi_ifd(ifd_entries_list, endian='<'):
    """Build a TIFF whose IFDs are chained in list order."""
    offsets = []
    offset = 8
    for entries in ifd_entries_list:
        offsets.append(offset)
        # Directory size does not depend on where it is placed
        offset += len(layout_ifd(entries, offset, endian))

    body = b''
    for i, entries in enumerate(ifd_entries_list):
        next_ifd = offsets[i + 1] if i + 1 < len(offsets) else 0
        body += layout_ifd(entries, offsets[i], endian, next_ifd)
    first = offsets[0] if offsets else 0
    return tiff_header(endian, first) + body


def build_exif_jpeg(tiff_data, extra_segments=()):
    """Wrap TIFF bytes in a minimal JPEG: SOI, segments, APP1 Exif, SOS, EOI.

    Args:
        extra_segments: (marker, payload) pairs placed before the Exif APP1.
    """
    out = b'\xff\xd8'
    for marker, payload in extra_segments:
        out += bytes([0xFF, marker]) + struct.pack('>H', len(payload) + 2) + payload
    exif = b'Exif\x00\x00' + tiff_data
    out += b'\xff\xe1' + struct.pack('>H', len(exif) + 2) + exif
    out += b'\xff\xda' + struct.pack('>H', 2) + b'\xff\xd9'
    return out


class SeekCountingStream(io.BytesIO):
    """BytesIO that records every seek target."""

    def __init__(self, data):
        super().__init__(data)
        self.seeks = []

    def seek(self, pos, whence=0):
        self.seeks.append(pos)
        return super().seek(pos, whence)


# A baseline IFD with Exif, GPS and Interoperability sub-directories
SAMPLE_ENTRIES = [
    (256, 3, 1, 64),                          # ImageWidth
    (257, 3, 1, 48),                          # ImageLength
    (259, 3, 1, 5),                           # Compression = LZW
    (262, 3, 1, 2),                           # PhotometricInterpretation = RGB
    (271, 2, 6, 'Canon'),                     # Make
    (282, 5, 1, Fraction(72, 1)),             # XResolution
    (296, 3, 1, 2),                           # ResolutionUnit = Inch
    (34665, 4, 1, SubIFD([                    # ExifIFD
        (33434, 5, 1, Fraction(1, 125)),      # ExposureTime
        (36864, 7, 4, b'0230'),               # ExifVersion
        (37385, 3, 1, 0b00011001),            # Flash
        (40965, 4, 1, SubIFD([                # InteroperabilityIFD
            (1, 2, 4, 'R98'),                 # InteroperabilityIndex
            (2, 7, 4, b'0100'),               # InteroperabilityVersion
        ])),
    ])),
    (34853, 4, 1, SubIFD([                    # GPSIFD
        (0, 1, 4, bytes([2, 3, 0, 0])),       # GPSVersionID
        (1, 2, 2, 'N'),                       # GPSLatitudeRef
        (2, 5, 3, [Fraction(51), Fraction(30), Fraction(2629, 100)]),
    ])),
]


@pytest.fixture
def sample_tiff():
    """Little-endian TIFF built from SAMPLE_ENTRIES."""
    return build_tiff(SAMPLE_ENTRIES)


@pytest.fixture
def sample_tiff_be():
    """Big-endian TIFF built from SAMPLE_ENTRIES."""
    return build_tiff(SAMPLE_ENTRIES, endian='>')


@pytest.fixture
def tmp_tiff(tmp_path, sample_tiff):
    """SAMPLE_ENTRIES TIFF written to disk."""
    filepath = tmp_path / 'sample.tif'
    filepath.write_bytes(sample_tiff)
    return filepath


@pytest.fixture
def tmp_jpeg(tmp_path, sample_tiff):
    """JPEG with an APP0 segment followed by the sample TIFF as Exif."""
    filepath = tmp_path / 'sample.jpg'
    app0 = b'JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
    filepath.write_bytes(build_exif_jpeg(sample_tiff, [(0xE0, app0)]))
    return filepath
