"""Tag record capture and type-driven value decoding.

A directory entry is 12 bytes: tag id (2), type (2), count (4) and a 4-byte
field that holds the value itself when it fits, else a pointer to it.
"""

import logging
import struct
from fractions import Fraction
from typing import Any, NamedTuple, Optional

from tiffscope.tiff.reader import ByteOrder, DecodingContext, decode_uint, to_signed

logger = logging.getLogger(__name__)

ENTRY_SIZE = 12
INLINE_SIZE = 4

# TIFF type definitions: {type_code: item_size_bytes}
TIFF_TYPES = {
    1: 1,    # BYTE
    2: 1,    # ASCII
    3: 2,    # SHORT
    4: 4,    # LONG
    5: 8,    # RATIONAL (num/denom)
    6: 1,    # SBYTE
    7: 1,    # UNDEFINED
    8: 2,    # SSHORT
    9: 4,    # SLONG
    10: 8,   # SRATIONAL
    11: 4,   # FLOAT
    12: 8,   # DOUBLE
}

ASCII = 2
UNDEFINED = 7
SIGNED_INTEGER_TYPES = {6, 8, 9}
RATIONAL_TYPES = {5, 10}
FLOAT_FORMATS = {11: 'f', 12: 'd'}

_STRUCT_PREFIX = {ByteOrder.LITTLE: '<', ByteOrder.BIG: '>'}


class TagRecord(NamedTuple):
    """A raw directory entry as stored, before value resolution."""
    code: int
    type_code: int
    count: int
    data: bytes

    @property
    def item_size(self) -> Optional[int]:
        return TIFF_TYPES.get(self.type_code)

    @property
    def total_size(self) -> Optional[int]:
        size = self.item_size
        if size is None:
            return None
        return size * self.count

    @property
    def is_inline(self) -> bool:
        total = self.total_size
        return total is None or total <= INLINE_SIZE


def read_tag_record(ctx: DecodingContext) -> TagRecord:
    """Read one 12-byte entry at the current position."""
    code = ctx.read_uint(2)
    type_code = ctx.read_uint(2)
    count = ctx.read_uint(4)
    data = ctx.read_bytes(INLINE_SIZE)
    return TagRecord(code, type_code, count, data)


def fetch_value_bytes(ctx: DecodingContext, record: TagRecord) -> Optional[bytes]:
    """Return the raw value bytes of a record, following its pointer if needed.

    Returns None for unknown type codes, whose size is undefined.
    """
    total = record.total_size
    if total is None:
        return None
    if total <= INLINE_SIZE:
        return record.data[:total]

    pointer = ctx.decode_uint(record.data)
    ctx.validate_data_pointer(pointer, total)
    logger.debug('Tag %d: fetching %d bytes at offset %d',
                 record.code, total, pointer)
    with ctx.at(pointer):
        return ctx.read_bytes(total)


def _decode_rational(chunk: bytes, byte_order: ByteOrder,
                     signed: bool) -> Optional[Fraction]:
    numerator = decode_uint(chunk, byte_order, 0, 4)
    denominator = decode_uint(chunk, byte_order, 4, 8)
    if signed:
        numerator = to_signed(numerator, 32)
        denominator = to_signed(denominator, 32)
    if denominator == 0:
        logger.debug('Rational %d/0 has no exact value', numerator)
        return None
    return Fraction(numerator, denominator)


def _decode_item(chunk: bytes, type_code: int, byte_order: ByteOrder) -> Any:
    if type_code in RATIONAL_TYPES:
        return _decode_rational(chunk, byte_order, signed=type_code == 10)
    if type_code in FLOAT_FORMATS:
        fmt = _STRUCT_PREFIX[byte_order] + FLOAT_FORMATS[type_code]
        return struct.unpack(fmt, chunk)[0]
    value = decode_uint(chunk, byte_order)
    if type_code in SIGNED_INTEGER_TYPES:
        return to_signed(value, len(chunk) * 8)
    return value


def decode_items(raw: bytes, type_code: int, count: int,
                 byte_order: ByteOrder) -> Any:
    """Decode ``count`` items of a known type from their raw bytes.

    ASCII becomes a str without its NUL terminator and UNDEFINED stays
    bytes. Other types give a single value for count 1, else a tuple.
    """
    if type_code == ASCII:
        if raw.endswith(b'\x00'):
            raw = raw[:-1]
        return raw.decode('ascii', errors='replace')
    if type_code == UNDEFINED:
        return bytes(raw)

    size = TIFF_TYPES[type_code]
    items = tuple(
        _decode_item(raw[i * size:(i + 1) * size], type_code, byte_order)
        for i in range(count)
    )
    if count == 1:
        return items[0]
    return items


def resolve_value(ctx: DecodingContext, record: TagRecord) -> Any:
    """Decode a record's value. Unknown types yield the raw 4-byte field."""
    raw = fetch_value_bytes(ctx, record)
    if raw is None:
        return record.data
    return decode_items(raw, record.type_code, record.count, ctx.byte_order)
