"""Low-level classic TIFF parser package.

Re-exports the public names of the submodules so callers can write
``from tiffscope.tiff import X``.
"""

# --- reader.py: byte order, primitive reads, context, pointer checks ---
from tiffscope.tiff.reader import (  # noqa: F401
    HEADER_SIZE,
    TIFF_VERSION,
    ByteOrder,
    DecodingContext,
    byte_order_from_signature,
    decode_uint,
    open_context,
    parse_endianness,
    parse_version,
    read_exact,
    read_uint,
    to_signed,
    validate_ifd_pointer,
)

# --- values.py: raw records and type-driven value decoding ---
from tiffscope.tiff.values import (  # noqa: F401
    ENTRY_SIZE,
    TIFF_TYPES,
    TagRecord,
    decode_items,
    fetch_value_bytes,
    read_tag_record,
    resolve_value,
)

# --- tags.py: tag id and type code registries ---
from tiffscope.tiff.tags import (  # noqa: F401
    GPS_TAG_NAMES,
    INTEROPERABILITY_TAG_NAMES,
    TAG_NAMES,
    TYPE_NAMES,
    tag_code,
    tag_symbol,
    type_symbol,
)

# --- interpret.py / geokeys.py: per-tag interpretation ---
from tiffscope.tiff.interpret import (  # noqa: F401
    ENUMERATED_VALUES,
    INTERPRETERS,
    decode_enumerated,
    decode_flash,
    decode_subfile_flags,
    decode_version,
    interpret_value,
)
from tiffscope.tiff.geokeys import (  # noqa: F401
    GEO_KEY_NAMES,
    decode_geo_key_directory,
)

# --- ifd.py: two-pass directory reads and chain walking ---
from tiffscope.tiff.ifd import (  # noqa: F401
    SUB_IFD_POINTERS,
    parse_one_ifd,
    read_ifd_records,
    walk_chain,
)
