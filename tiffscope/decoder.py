"""Top-level decode entry points."""

import io
import logging
import os
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from tiffscope.config import DecodeConfig
from tiffscope.models import IFD
from tiffscope.tiff.ifd import walk_chain
from tiffscope.tiff.reader import open_context

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, bytes, bytearray, memoryview, BinaryIO]


def decode_stream(stream: BinaryIO, start: int = 0, end: Optional[int] = None,
                  config: Optional[DecodeConfig] = None) -> List[IFD]:
    """Decode the TIFF structure found at ``start`` in a seekable stream.

    ``end`` is an exclusive absolute bound used for pointer validation.
    The stream is borrowed: it is neither closed nor rewound.
    """
    ctx = open_context(stream, start, end, config)
    first_pointer = ctx.validate_ifd_pointer(ctx.read_uint(4))
    return walk_chain(ctx, first_pointer)


def decode(source: Source, start: int = 0, end: Optional[int] = None,
           config: Optional[DecodeConfig] = None) -> List[IFD]:
    """Decode a TIFF from a path, a bytes-like object or a binary stream.

    Returns the root IFDs in chain order. Raises a TiffError subclass for
    structurally invalid input and EOFError on truncated data.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return decode_stream(io.BytesIO(bytes(source)), start, end, config)
    if isinstance(source, (str, Path, os.PathLike)):
        logger.debug('Decoding %s', source)
        with open(source, 'rb') as f:
            return decode_stream(f, start, end, config)
    return decode_stream(source, start, end, config)
