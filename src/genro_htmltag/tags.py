# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagType - well-known HTML tag names and custom tags.

There is nothing special about the well-known tags: ``TagType.from_name('p')``
and a custom tag render the same way. They exist for convenience and to give
tags a stable sort order, so they can be used as sort keys or in sets.

Example:
    >>> TagType.from_name('P')
    TagType('p')
    >>> TagType.from_name('my-widget').is_custom
    True
    >>> sorted([TagType.DIV, TagType.P, TagType.A])
    [TagType('p'), TagType('a'), TagType('div')]
"""

from __future__ import annotations

from typing import ClassVar

# Elements that have no content and no end tag in HTML5.
VOID_ELEMENTS: frozenset[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

# Sort rank of the well-known tags, ascending. Custom tags sit between the
# inline tags and img.
_RANK: dict[str, int] = {
    'p': 0,
    'span': 1,
    'a': 2,
    'table': 2,
    'tr': 2,
    'td': 2,
    'th': 2,
    'img': 4,
    'h6': 5,
    'h5': 6,
    'h4': 7,
    'h3': 8,
    'h2': 9,
    'h1': 10,
    'div': 11,
}
_CUSTOM_RANK = 3

KNOWN_TAGS: frozenset[str] = frozenset(_RANK)


class TagType:
    """The type of an HTML tag: one of the well-known tags or a custom one.

    Class attributes ``TagType.P``, ``TagType.DIV``... hold the well-known
    types. Anything else built through ``from_name`` is custom.
    """

    __slots__ = ('_name',)

    P: ClassVar[TagType]
    DIV: ClassVar[TagType]
    SPAN: ClassVar[TagType]
    A: ClassVar[TagType]
    H1: ClassVar[TagType]
    H2: ClassVar[TagType]
    H3: ClassVar[TagType]
    H4: ClassVar[TagType]
    H5: ClassVar[TagType]
    H6: ClassVar[TagType]
    IMG: ClassVar[TagType]
    TABLE: ClassVar[TagType]
    TR: ClassVar[TagType]
    TD: ClassVar[TagType]
    TH: ClassVar[TagType]

    def __init__(self, name: str) -> None:
        self._name = name.lower()

    @classmethod
    def from_name(cls, name: str) -> TagType:
        """Return the TagType for a tag name (case-insensitive).

        Unknown names become custom tags, lowercased.
        """
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_custom(self) -> bool:
        """True if this is not one of the well-known tags."""
        return self._name not in _RANK

    @property
    def is_void(self) -> bool:
        return self._name in VOID_ELEMENTS

    def html(self) -> str:
        """Return the tag name as written in markup."""
        return self._name

    def _rank(self) -> int:
        return _RANK.get(self._name, _CUSTOM_RANK)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"TagType({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagType):
            return NotImplemented
        return self._name == other._name

    # Ordering compares rank only: two different custom tags are neither
    # less nor greater than each other.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TagType):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TagType):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TagType):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TagType):
            return NotImplemented
        return self._rank() >= other._rank()

    def __hash__(self) -> int:
        return hash(self._name)


for _name in _RANK:
    setattr(TagType, _name.upper(), TagType(_name))
del _name
