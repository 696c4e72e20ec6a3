"""IFD chain walking and tag tree construction.

Each directory is read in two passes. The first captures the entry count,
every 12-byte record and the next pointer with purely sequential reads.
The second resolves values, which may seek anywhere (out-of-line data,
Exif/GPS/Interoperability sub-directories) without disturbing the first.
"""

import logging
from typing import Dict, List, Mapping, Tuple

from tiffscope.errors import InvalidPointerError
from tiffscope.models import IFD, Tag
from tiffscope.tiff.interpret import interpret_value
from tiffscope.tiff.reader import DecodingContext
from tiffscope.tiff.tags import (
    GPS_TAG_NAMES,
    INTEROPERABILITY_TAG_NAMES,
    TAG_NAMES,
    tag_symbol,
    type_symbol,
)
from tiffscope.tiff.values import ENTRY_SIZE, TagRecord, read_tag_record, resolve_value

logger = logging.getLogger(__name__)

# Pointer tags whose value is replaced by the directory they point to,
# mapped to the tag namespace used inside that directory.
SUB_IFD_POINTERS: Dict[str, Mapping[int, str]] = {
    'ExifIFD': TAG_NAMES,
    'GPSIFD': GPS_TAG_NAMES,
    'InteroperabilityIFD': INTEROPERABILITY_TAG_NAMES,
}


def read_ifd_records(ctx: DecodingContext,
                     pointer: int) -> Tuple[List[TagRecord], int]:
    """First pass: read all raw records and the next pointer at ``pointer``."""
    ctx.seek(pointer)
    num_entries = ctx.read_uint(2)
    limit = ctx.limit
    if limit is not None and pointer + 2 + ENTRY_SIZE * num_entries + 4 > limit:
        raise InvalidPointerError(pointer, 'directory overruns end of TIFF region')
    records = [read_tag_record(ctx) for _ in range(num_entries)]
    next_pointer = ctx.validate_ifd_pointer(ctx.read_uint(4))
    logger.debug('IFD at %d: %d entries, next %d',
                 pointer, num_entries, next_pointer)
    return records, next_pointer


def _parse_sub_ifd(ctx: DecodingContext, record: TagRecord,
                   namespace: Mapping[int, str], depth: int) -> IFD:
    pointer = ctx.decode_uint(record.data)
    if depth > ctx.config.max_sub_ifd_depth:
        raise InvalidPointerError(
            pointer,
            f'sub-IFD nesting deeper than {ctx.config.max_sub_ifd_depth}')
    if pointer == 0:
        raise InvalidPointerError(pointer, 'sub-IFD pointer is null')
    ctx.validate_ifd_pointer(pointer)
    with ctx.at(pointer):
        return parse_one_ifd(ctx, pointer, namespace, depth)


def _resolve_tag(ctx: DecodingContext, record: TagRecord,
                 namespace: Mapping[int, str], depth: int) -> Tag:
    """Second pass for one record."""
    tag_id = tag_symbol(record.code, namespace)
    sub_namespace = SUB_IFD_POINTERS.get(tag_id) if isinstance(tag_id, str) else None

    if sub_namespace is not None:
        value = _parse_sub_ifd(ctx, record, sub_namespace, depth + 1)
    else:
        value = resolve_value(ctx, record)
        if ctx.config.interpret_values:
            value = interpret_value(tag_id, value)

    return Tag(
        id=tag_id,
        type=type_symbol(record.type_code),
        value=value,
        code=record.code,
        count=record.count,
    )


def parse_one_ifd(ctx: DecodingContext, pointer: int,
                  namespace: Mapping[int, str] = TAG_NAMES,
                  depth: int = 0) -> IFD:
    """Read and fully resolve the directory at logical offset ``pointer``.

    Raises InvalidPointerError if this parse call has already visited the
    offset, which is how cyclic chains and self-referencing sub-IFDs are
    stopped.
    """
    if pointer in ctx.visited:
        raise InvalidPointerError(pointer, 'directory already visited')
    ctx.visited.add(pointer)

    records, next_pointer = read_ifd_records(ctx, pointer)
    tags = tuple(_resolve_tag(ctx, record, namespace, depth) for record in records)
    return IFD(tags=tags, next=next_pointer, offset=pointer)


def walk_chain(ctx: DecodingContext, first_pointer: int) -> List[IFD]:
    """Follow ``next`` pointers from ``first_pointer`` until 0."""
    ifds = []
    pointer = first_pointer
    while pointer != 0:
        ifd = parse_one_ifd(ctx, pointer)
        ifds.append(ifd)
        pointer = ifd.next
    logger.debug('Walked %d top-level IFDs', len(ifds))
    return ifds
