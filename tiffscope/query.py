"""Walking, searching and exporting decoded tag trees.

A *tree* is either a single IFD or the sequence of root IFDs returned by
``decode``. Leaf tags are tags whose value is not a nested IFD; walks
descend into Exif/GPS/Interoperability sub-directories transparently.
"""

import logging
from fractions import Fraction
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from tiffscope.models import IFD, GeoKeyDirectory, GeoKeyReference, Symbol, Tag
from tiffscope.tiff.geokeys import decode_geo_key_directory

logger = logging.getLogger(__name__)

Tree = Union[IFD, Sequence[IFD]]

ALL = 'all'


def _roots(tree: Tree) -> Tuple[IFD, ...]:
    if isinstance(tree, IFD):
        return (tree,)
    return tuple(tree)


def _matches(tag: Tag, ids) -> bool:
    return tag.id in ids or tag.code in ids


def iter_tags(tree: Tree) -> Iterator[Tag]:
    """Yield every leaf tag depth-first, in directory order."""
    for ifd in _roots(tree):
        for tag in ifd.tags:
            if isinstance(tag.value, IFD):
                yield from iter_tags(tag.value)
            else:
                yield tag


def traverse(tree: Tree, visitor: Callable[[Tag], Any]) -> None:
    """Call ``visitor`` on every leaf tag, depth-first."""
    for tag in iter_tags(tree):
        visitor(tag)


def flatten(tree: Tree) -> List[Tuple[str, Any]]:
    """Return ``(path, value)`` for every leaf tag.

    Paths name the root directory and each enclosing pointer tag, e.g.
    ``'IFD0/ExifIFD/ExposureTime'``.
    """
    out = []

    def walk(ifd: IFD, prefix: str) -> None:
        for tag in ifd.tags:
            path = f'{prefix}/{tag.id}'
            if isinstance(tag.value, IFD):
                walk(tag.value, path)
            else:
                out.append((path, tag.value))

    for index, ifd in enumerate(_roots(tree)):
        walk(ifd, f'IFD{index}')
    return out


def extract(tree: Tree, ids: Union[Symbol, Iterable[Symbol]] = ALL) -> List[Tuple[Symbol, Any]]:
    """Collect ``(tag id, value)`` pairs for the requested tags.

    ``ids`` holds symbolic names and/or numeric codes, or is ``'all'``.
    Naming a sub-directory pointer tag (e.g. 34665 or ``'ExifIFD'``)
    selects every leaf tag inside that directory. The order of the result
    carries no meaning.
    """
    take_all = isinstance(ids, str) and ids == ALL
    if take_all:
        wanted = frozenset()
    elif isinstance(ids, (str, int)):
        wanted = frozenset([ids])
    else:
        wanted = frozenset(ids)
    out = []

    def walk(ifd: IFD, selected: bool) -> None:
        for tag in ifd.tags:
            hit = selected or _matches(tag, wanted)
            if isinstance(tag.value, IFD):
                walk(tag.value, hit)
            elif hit:
                out.append((tag.id, tag.value))

    for ifd in _roots(tree):
        walk(ifd, take_all)
    return out


def find(tree: Tree, tag_id: Symbol) -> Optional[Tag]:
    """Return the first tag (leaf or directory) with the given name or code."""
    for ifd in _roots(tree):
        for tag in ifd.tags:
            if tag.id == tag_id or tag.code == tag_id:
                return tag
            if isinstance(tag.value, IFD):
                found = find(tag.value, tag_id)
                if found is not None:
                    return found
    return None


def _dereference(ifd: IFD, ref: GeoKeyReference) -> Any:
    source = ifd.get(ref.tag)
    if source is None:
        logger.warning('GeoKey references missing tag %s', ref.tag)
        return ref

    data = source.value
    # Keys may point back into the GeoKeyDirectory array itself
    if isinstance(data, GeoKeyDirectory):
        data = data.raw
    if isinstance(data, str):
        text = data[ref.offset:ref.offset + ref.count]
        # GeoAsciiParams entries are terminated by '|'
        if text.endswith('|'):
            text = text[:-1]
        return text
    if not isinstance(data, tuple):
        data = (data,)
    items = data[ref.offset:ref.offset + ref.count]
    if len(items) != ref.count:
        logger.warning('GeoKey reference %s[%d:%d] is out of range',
                       ref.tag, ref.offset, ref.offset + ref.count)
        return ref
    if ref.count == 1:
        return items[0]
    return tuple(items)


def resolve_geo_keys(ifd: IFD) -> Dict[Symbol, Any]:
    """Return ``{geo key: value}`` with references into GeoDoubleParams,
    GeoAsciiParams or other tags of the same IFD resolved."""
    tag = ifd.get('GeoKeyDirectory')
    if tag is None:
        return {}
    directory = tag.value
    if not isinstance(directory, GeoKeyDirectory):
        directory = decode_geo_key_directory(directory)
        if not isinstance(directory, GeoKeyDirectory):
            return {}

    result = {}
    for entry in directory.keys:
        value = entry.value
        if isinstance(value, GeoKeyReference):
            value = _dereference(ifd, value)
        result[entry.key] = value
    return result


def _jsonable(value: Any) -> Any:
    if isinstance(value, IFD):
        return _ifd_to_dict(value)
    if isinstance(value, Fraction):
        return f'{value.numerator}/{value.denominator}'
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, (set, frozenset)):
        return sorted(str(v) for v in value)
    if isinstance(value, (tuple, list)):
        return [_jsonable(v) for v in value]
    if isinstance(value, GeoKeyDirectory):
        return {
            'header': list(value.header),
            'keys': {str(e.key): _jsonable(e.value) for e in value.keys},
        }
    if isinstance(value, GeoKeyReference):
        return {'tag': value.tag, 'count': value.count, 'offset': value.offset}
    return value


def _ifd_to_dict(ifd: IFD) -> Dict[str, Any]:
    return {str(tag.id): _jsonable(tag.value) for tag in ifd.tags}


def to_dict(tree: Tree) -> Dict[str, Any]:
    """Render a tree as JSON-ready data.

    A single IFD becomes ``{tag id: value}``; a root sequence becomes
    ``{'IFD0': {...}, 'IFD1': {...}}``.
    """
    if isinstance(tree, IFD):
        return _ifd_to_dict(tree)
    return {f'IFD{i}': _ifd_to_dict(ifd) for i, ifd in enumerate(tree)}
