"""Decode errors -- every variant aborts the current parse call.

Short reads are not part of this set: they surface as the builtin EOFError.
"""

from typing import Optional


class TiffError(ValueError):
    """Base class for input that cannot be decoded as TIFF."""


class NotATiffError(TiffError):
    """The 2-byte signature is neither b'II' nor b'MM'."""

    def __init__(self, signature: bytes):
        self.signature = signature
        super().__init__(f'Not a TIFF byte-order signature: {signature!r}')


class WrongVersionError(TiffError):
    """The version word after the signature is not 42."""

    def __init__(self, found: int):
        self.found = found
        super().__init__(f'Unsupported TIFF version {found} (expected 42)')


class InvalidPointerError(TiffError):
    """An IFD or data offset fails the alignment or bounds checks."""

    def __init__(self, pointer: int, reason: Optional[str] = None):
        self.pointer = pointer
        self.reason = reason
        msg = f'Invalid TIFF pointer {pointer}'
        if reason:
            msg += f' ({reason})'
        super().__init__(msg)


class NotAJpegError(TiffError):
    """Exif lookup was asked to scan a stream without a JPEG SOI marker."""


class ExifNotFoundError(TiffError):
    """The JPEG stream has no APP1 Exif segment."""
