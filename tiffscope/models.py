"""Immutable value objects for the decoded tag tree."""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple, Union

Symbol = Union[str, int]


@dataclass(frozen=True)
class Tag:
    """A single decoded directory entry.

    ``id`` and ``type`` are symbolic names when registered, else the raw
    numeric codes. ``code`` always holds the numeric tag id.
    """
    id: Symbol
    type: Symbol
    value: Any
    code: int
    count: int

    @property
    def is_directory(self) -> bool:
        return isinstance(self.value, IFD)


@dataclass(frozen=True)
class IFD:
    """An Image File Directory: tags in stored order plus the next pointer."""
    tags: Tuple[Tag, ...]
    next: int
    offset: int = 0

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def get(self, tag_id: Symbol) -> Optional[Tag]:
        """Return the first tag matching a symbolic name or numeric code."""
        for tag in self.tags:
            if tag.id == tag_id or tag.code == tag_id:
                return tag
        return None

    def __getitem__(self, tag_id: Symbol) -> Any:
        tag = self.get(tag_id)
        if tag is None:
            raise KeyError(tag_id)
        return tag.value

    def __contains__(self, tag_id: Symbol) -> bool:
        return self.get(tag_id) is not None


@dataclass(frozen=True)
class GeoKeyReference:
    """A GeoKey whose values live in another tag's array."""
    tag: Symbol
    count: int
    offset: int


@dataclass(frozen=True)
class GeoKeyEntry:
    key: Symbol
    value: Union[int, GeoKeyReference]


@dataclass(frozen=True)
class GeoKeyDirectory:
    """Interpreted GeoKeyDirectory tag.

    ``header`` is (directory version, key revision, minor revision).
    ``raw`` keeps the SHORT array the directory was decoded from.
    """
    header: Tuple[int, int, int]
    keys: Tuple[GeoKeyEntry, ...]
    raw: Tuple[int, ...] = ()

    def get(self, key: Symbol) -> Optional[GeoKeyEntry]:
        for entry in self.keys:
            if entry.key == key:
                return entry
        return None
