"""Endianness-aware primitive reads and the per-parse decoding context.

All pointers stored in a TIFF structure are logical offsets relative to the
byte that holds the 'II'/'MM' signature. The context translates them into
absolute stream positions, so a TIFF embedded at a nonzero offset (e.g. an
Exif block inside a JPEG) decodes exactly like a standalone file.
"""

import enum
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, Optional, Set

from tiffscope.config import DecodeConfig
from tiffscope.errors import InvalidPointerError, NotATiffError, WrongVersionError

logger = logging.getLogger(__name__)

TIFF_VERSION = 42

# Header is signature(2) + version(2) + first IFD offset(4)
HEADER_SIZE = 8

_CHUNK_SIZE = 65536  # 64 KB


class ByteOrder(enum.Enum):
    LITTLE = 'little'
    BIG = 'big'


_SIGNATURES = {
    b'II': ByteOrder.LITTLE,
    b'MM': ByteOrder.BIG,
}


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise EOFError.

    Large values are read in 64 KB chunks so a corrupt count cannot force
    a huge up-front allocation before the short read is noticed.
    """
    if size <= _CHUNK_SIZE:
        data = stream.read(size)
        if len(data) < size:
            raise EOFError(f'Short read: wanted {size} bytes, got {len(data)}')
        return data

    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(min(_CHUNK_SIZE, remaining))
        if not chunk:
            raise EOFError(f'Short read: wanted {size} bytes, got {size - remaining}')
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)


def decode_uint(data: bytes, byte_order: ByteOrder,
                start: int = 0, end: Optional[int] = None) -> int:
    """Decode an unsigned integer from ``data[start:end]``."""
    window = data[start:end]
    return int.from_bytes(window, byte_order.value, signed=False)


def read_uint(stream: BinaryIO, width: int, byte_order: ByteOrder) -> int:
    """Read an unsigned ``width``-byte integer, advancing the stream."""
    return decode_uint(read_exact(stream, width), byte_order)


def to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned integer as two's complement over ``bits``."""
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


def byte_order_from_signature(signature: bytes) -> ByteOrder:
    try:
        return _SIGNATURES[bytes(signature)]
    except KeyError:
        raise NotATiffError(bytes(signature)) from None


def parse_endianness(stream: BinaryIO) -> ByteOrder:
    """Read the 2-byte signature at the current position."""
    return byte_order_from_signature(read_exact(stream, 2))


def validate_ifd_pointer(pointer: int, limit: Optional[int] = None) -> int:
    """Check an IFD pointer against alignment and bounds.

    ``limit`` is ``end - start`` when the region end is known. A pointer of 0
    always passes; callers that cannot accept the end-of-chain sentinel must
    reject it themselves.
    """
    if pointer % 2:
        raise InvalidPointerError(pointer, 'not word aligned')
    if 0 < pointer < HEADER_SIZE:
        raise InvalidPointerError(pointer, 'points into the header')
    if limit is not None and pointer >= limit:
        raise InvalidPointerError(pointer, f'beyond end of TIFF region ({limit})')
    return pointer


@dataclass
class DecodingContext:
    """Byte order, region bounds and the borrowed stream for one parse call.

    The stream's lifetime belongs to the caller. ``visited`` collects the
    directory offsets read so far and is used to reject cycles.
    """
    stream: BinaryIO
    byte_order: ByteOrder
    start: int = 0
    end: Optional[int] = None
    config: DecodeConfig = field(default_factory=DecodeConfig.default)
    visited: Set[int] = field(default_factory=set)

    @property
    def limit(self) -> Optional[int]:
        """Logical size of the TIFF region, if its end is known."""
        if self.end is None:
            return None
        return self.end - self.start

    def read_bytes(self, size: int) -> bytes:
        return read_exact(self.stream, size)

    def read_uint(self, width: int) -> int:
        return read_uint(self.stream, width, self.byte_order)

    def decode_uint(self, data: bytes, start: int = 0,
                    end: Optional[int] = None) -> int:
        return decode_uint(data, self.byte_order, start, end)

    def tell(self) -> int:
        """Current logical position."""
        return self.stream.tell() - self.start

    def seek(self, pointer: int) -> None:
        """Move to a logical position."""
        self.stream.seek(self.start + pointer)

    @contextmanager
    def at(self, pointer: int) -> Iterator[None]:
        """Temporarily move to ``pointer``; restore the read cursor on exit."""
        saved = self.stream.tell()
        self.seek(pointer)
        try:
            yield
        finally:
            self.stream.seek(saved)

    def validate_ifd_pointer(self, pointer: int) -> int:
        return validate_ifd_pointer(pointer, self.limit)

    def validate_data_pointer(self, pointer: int, size: int) -> int:
        """Check an out-of-line value offset covering ``size`` bytes."""
        if self.config.require_word_alignment and pointer % 2:
            raise InvalidPointerError(pointer, 'not word aligned')
        if pointer < HEADER_SIZE:
            raise InvalidPointerError(pointer, 'points into the header')
        limit = self.limit
        if limit is not None and pointer + size > limit:
            raise InvalidPointerError(
                pointer, f'{size} bytes overrun end of TIFF region ({limit})')
        return pointer


def parse_version(ctx: DecodingContext) -> int:
    """Read the version word that follows the signature."""
    version = ctx.read_uint(2)
    if version != TIFF_VERSION:
        raise WrongVersionError(version)
    return version


def open_context(stream: BinaryIO, start: int = 0, end: Optional[int] = None,
                 config: Optional[DecodeConfig] = None) -> DecodingContext:
    """Validate the header at ``start`` and return a context positioned
    just before the first-IFD pointer."""
    if end is not None and end - start < HEADER_SIZE:
        raise InvalidPointerError(end, 'region too small for a TIFF header')
    stream.seek(start)
    byte_order = parse_endianness(stream)
    ctx = DecodingContext(
        stream=stream,
        byte_order=byte_order,
        start=start,
        end=end,
        config=config if config is not None else DecodeConfig.default(),
    )
    parse_version(ctx)
    logger.debug('TIFF header at %d: %s-endian', start, byte_order.value)
    return ctx
