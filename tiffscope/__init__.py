"""tiffscope -- TIFF, Exif and GeoTIFF metadata decoder."""

__version__ = "1.0.0"

from tiffscope.config import DecodeConfig
from tiffscope.decoder import decode, decode_stream
from tiffscope.errors import (
    ExifNotFoundError,
    InvalidPointerError,
    NotAJpegError,
    NotATiffError,
    TiffError,
    WrongVersionError,
)
from tiffscope.jpeg import decode_jpeg_exif, find_exif_region
from tiffscope.models import IFD, GeoKeyDirectory, GeoKeyEntry, GeoKeyReference, Tag
from tiffscope.query import extract, find, flatten, iter_tags, resolve_geo_keys, to_dict, traverse

__all__ = [
    "__version__",
    "DecodeConfig",
    "decode",
    "decode_stream",
    "decode_jpeg_exif",
    "find_exif_region",
    "Tag",
    "IFD",
    "GeoKeyDirectory",
    "GeoKeyEntry",
    "GeoKeyReference",
    "TiffError",
    "NotATiffError",
    "WrongVersionError",
    "InvalidPointerError",
    "NotAJpegError",
    "ExifNotFoundError",
    "iter_tags",
    "traverse",
    "flatten",
    "extract",
    "find",
    "resolve_geo_keys",
    "to_dict",
]
