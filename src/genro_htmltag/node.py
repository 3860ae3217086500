# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTag - a tag node with a chainable builder API.

An HtmlTag holds everything needed to produce the markup of one element:
its name, attributes, classes, text body and child tags. Nodes form a tree
that is rendered to a string on demand.

Two calling conventions are available for every mutator:

- ``add_*`` / ``set_*`` change the tag in place and return it, for
  imperative chaining on a tag you hold a reference to.
- ``with_*`` leave the tag untouched and return a changed copy, for
  expressions built out of temporaries.

Example:
    >>> div = HtmlTag('div').add_class('test')
    >>> div.add_child(HtmlTag('p').set_body('Hello World'))
    HtmlTag('div', children=1)
    >>> div.to_html()
    '<div class="test"><p>Hello World</p></div>'

    >>> HtmlTag('a').with_href('/x').with_body('x').to_html()
    '<a href="/x">x</a>'

Warning:
    Nothing is escaped unless ``to_html(escape=True)`` is used. Attribute
    values, class names and body text are written verbatim, so data coming
    from untrusted input must be escaped by the caller (or rendered with
    ``escape=True``) to avoid markup injection.

Ownership:
    A tag must have at most one parent. Adding the same HtmlTag instance
    to two parents is not detected; use ``copy()`` to place the same
    content twice. Adding a tag to itself or to one of its descendants
    raises InvalidChildError.
"""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Callable, Iterable, Iterator, Mapping

from .exceptions import InvalidChildError, InvalidTagNameError
from .tags import TagType

logger = logging.getLogger(__name__)

_TAG_NAME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9_.:-]*$')

# Attributes that get set_<name> / with_<name> shortcuts.
SHORTCUT_ATTRIBUTES: tuple[str, ...] = (
    'id', 'style', 'href', 'name', 'type', 'title',
    'src', 'alt', 'value', 'rel', 'target',
)


def _check_tag_name(name: Any) -> str:
    if not isinstance(name, str):
        raise InvalidTagNameError(
            f"Tag name must be a string, not {type(name).__name__}"
        )
    if not name:
        raise InvalidTagNameError("Tag name cannot be empty")
    if not _TAG_NAME_PATTERN.match(name):
        raise InvalidTagNameError(f"Invalid tag name: '{name}'")
    return name


def _attribute_key(key: str) -> str:
    """Map a Python keyword to an attribute name: ``class_`` -> ``class``."""
    if key.endswith('_') and len(key) > 1:
        return key[:-1]
    return key


class HtmlTag:
    """A node in an HTML tag tree.

    Each tag has:
    - name: The tag name, fixed at construction
    - attributes: Ordered dict of attribute name to value
    - classes: Ordered list of unique class names
    - body: Optional text rendered before the children
    - children: Ordered list of child HtmlTag
    - void: If True, renders as a void element (``<br>``) with no end tag

    The ``class`` attribute is never stored in ``attributes``: passing it to
    add_attribute() feeds the class list, which is rendered after all other
    attributes.

    Example:
        >>> tag = HtmlTag('div', id='main', class_='container')
        >>> tag.to_html()
        '<div id="main" class="container"></div>'
    """

    __slots__ = ('_name', '_attributes', '_classes', '_body', '_children', '_void')

    def __init__(
        self,
        name: str | TagType,
        /,
        body: str | None = None,
        classes: str | Iterable[str] = (),
        void: bool = False,
        **attributes: Any,
    ) -> None:
        """Initialize an HtmlTag.

        Args:
            name: Tag name (e.g. 'div', 'my-widget') or a TagType. Positional
                only, so ``name=`` is free for the ``name`` attribute.
            body: Optional text content.
            classes: Class names to add, in order. A string is split on
                whitespace, like the ``class`` attribute.
            void: Render as a void element, without body, children
                and end tag.
            **attributes: Attributes to add, in order. A trailing underscore
                is dropped so reserved words can be used (``class_``, ``for_``).

        Raises:
            InvalidTagNameError: If the name is empty or not a valid tag name.
        """
        if isinstance(name, TagType):
            name = name.html()
        self._name = _check_tag_name(name)
        self._attributes: dict[str, str] = {}
        self._classes: list[str] = []
        self._body: str | None = None
        self._children: list[HtmlTag] = []
        self._void = bool(void)

        if isinstance(classes, str):
            classes = classes.split()
        for class_name in classes:
            self.add_class(class_name)
        for key, value in attributes.items():
            self.add_attribute(_attribute_key(key), value)
        if body is not None:
            self.set_body(body)

    @classmethod
    def fresh(
        cls,
        tag_type: TagType | str,
        body: str | None = None,
        class_names: str | Iterable[str] = (),
    ) -> HtmlTag:
        """Create a tag from a type, an optional body and class names.

        A string of class names is split on whitespace.

        Example:
            >>> HtmlTag.fresh(TagType.A, 'Hello World', ['test']).to_html()
            '<a class="test">Hello World</a>'
        """
        return cls(tag_type, body=body, classes=class_names)

    # ==================== Properties ====================

    @property
    def name(self) -> str:
        """The tag name, as given at construction."""
        return self._name

    @property
    def tag_type(self) -> TagType:
        return TagType.from_name(self._name)

    @property
    def attributes(self) -> dict[str, str]:
        """A copy of the attributes, in insertion order."""
        return dict(self._attributes)

    @property
    def classes(self) -> list[str]:
        """A copy of the class names, in first-insertion order."""
        return list(self._classes)

    @property
    def body(self) -> str | None:
        return self._body

    @property
    def children(self) -> list[HtmlTag]:
        """A copy of the children list. The children themselves are not copied."""
        return list(self._children)

    @property
    def void(self) -> bool:
        return self._void

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"HtmlTag({self._name!r}, children={len(self._children)})"

    def __str__(self) -> str:
        return self.to_html()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HtmlTag):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if (
                a._name != b._name
                or a._void != b._void
                or a._body != b._body
                or a._classes != b._classes
                or list(a._attributes.items()) != list(b._attributes.items())
                or len(a._children) != len(b._children)
            ):
                return False
            pairs.extend(zip(a._children, b._children))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._children)

    def __iter__(self) -> Iterator[HtmlTag]:
        """Iterate over direct children in order."""
        return iter(self._children)

    # ==================== Attributes ====================

    def add_attribute(self, key: str, value: Any) -> HtmlTag:
        """Set an attribute, replacing any previous value.

        A replaced attribute keeps its original position. The ``class`` key
        is split on whitespace and each name goes through add_class().

        Args:
            key: Attribute name.
            value: Attribute value, converted with str().

        Raises:
            ValueError: If key is empty.
        """
        if not key:
            raise ValueError("Attribute name cannot be empty")
        if key == 'class':
            for class_name in str(value).split():
                self.add_class(class_name)
            return self
        self._attributes[key] = str(value)
        return self

    def add_attributes(
        self, _attributes: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> HtmlTag:
        """Set several attributes at once, in iteration order.

        Args:
            _attributes: Mapping of attribute names to values.
            **kwargs: More attributes; ``class_`` stands for ``class``.
        """
        if _attributes:
            for key, value in _attributes.items():
                self.add_attribute(key, value)
        for key, value in kwargs.items():
            self.add_attribute(_attribute_key(key), value)
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        if key == 'class':
            return ' '.join(self._classes) if self._classes else default
        return self._attributes.get(key, default)

    def remove_attribute(self, key: str) -> HtmlTag:
        """Remove an attribute if present. ``class`` clears all classes."""
        if key == 'class':
            self._classes.clear()
        else:
            self._attributes.pop(key, None)
        return self

    # ==================== Classes ====================

    def add_class(self, class_name: str) -> HtmlTag:
        """Append a class name unless it is already present.

        Raises:
            ValueError: If the name is empty or contains whitespace.
        """
        if not class_name or any(ch.isspace() for ch in class_name):
            raise ValueError(f"Invalid class name: '{class_name}'")
        if class_name not in self._classes:
            self._classes.append(class_name)
        return self

    def remove_class(self, class_name: str) -> HtmlTag:
        if class_name in self._classes:
            self._classes.remove(class_name)
        return self

    def has_class(self, class_name: str) -> bool:
        return class_name in self._classes

    # ==================== Body ====================

    def set_body(self, body: str | None) -> HtmlTag:
        """Replace the text content. None clears it.

        The text is rendered verbatim unless to_html(escape=True) is used.
        """
        self._body = None if body is None else str(body)
        return self

    # ==================== Children ====================

    def add_child(self, child: HtmlTag) -> HtmlTag:
        """Append a child tag.

        The child is owned by this tag from now on and must not be added
        anywhere else.

        Raises:
            TypeError: If child is not an HtmlTag.
            InvalidChildError: If child is this tag or contains it.
        """
        if not isinstance(child, HtmlTag):
            raise TypeError(
                f"child must be an HtmlTag, not {type(child).__name__}"
            )
        if child._contains(self):
            raise InvalidChildError(
                f"Cannot add '{child.name}' to '{self._name}': "
                "the tree would contain a cycle"
            )
        self._children.append(child)
        return self

    def add_children(self, *children: HtmlTag) -> HtmlTag:
        for child in children:
            self.add_child(child)
        return self

    def _contains(self, target: HtmlTag) -> bool:
        """True if target is this tag or one of its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node is target:
                return True
            stack.extend(node._children)
        return False

    # ==================== Copy-returning variants ====================

    def _copy_node(self) -> HtmlTag:
        new = HtmlTag.__new__(HtmlTag)
        new._name = self._name
        new._attributes = dict(self._attributes)
        new._classes = list(self._classes)
        new._body = self._body
        new._children = []
        new._void = self._void
        return new

    def copy(self) -> HtmlTag:
        """Return a deep copy of this tag and its whole subtree."""
        root = self._copy_node()
        pending = [(self, root)]
        while pending:
            source, target = pending.pop()
            for child in source._children:
                new_child = child._copy_node()
                target._children.append(new_child)
                pending.append((child, new_child))
        return root

    def with_attribute(self, key: str, value: Any) -> HtmlTag:
        return self.copy().add_attribute(key, value)

    def with_attributes(
        self, _attributes: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> HtmlTag:
        return self.copy().add_attributes(_attributes, **kwargs)

    def with_class(self, class_name: str) -> HtmlTag:
        return self.copy().add_class(class_name)

    def with_body(self, body: str | None) -> HtmlTag:
        return self.copy().set_body(body)

    def with_child(self, child: HtmlTag) -> HtmlTag:
        """Return a copy of this tag with child appended.

        The child itself is handed over to the copy, not copied.
        """
        return self.copy().add_child(child)

    def with_children(self, *children: HtmlTag) -> HtmlTag:
        return self.copy().add_children(*children)

    # ==================== Style sheets ====================

    def embed_style_sheet(self, sheet: Any) -> HtmlTag:
        """Append a ``<style>`` child holding the CSS of a StyleSheet."""
        return self.add_child(HtmlTag('style', body=sheet.to_css()))

    def with_style_sheet(self, sheet: Any) -> HtmlTag:
        return self.copy().embed_style_sheet(sheet)

    # ==================== Rendering ====================

    def to_html(self, escape: bool = False) -> str:
        """Render this tag and its subtree as markup.

        Attributes are written in insertion order, then ``class``. The body
        comes before the children. Void tags stop after the start tag.

        Args:
            escape: If True, escape attribute values, class names and body
                text with html.escape(). Tag and attribute names are never
                escaped.

        Returns:
            The markup string. Rendering does not modify the tree.
        """
        parts: list[str] = []
        self._render(parts, escape)
        return "".join(parts)

    render = to_html

    def _render(self, parts: list[str], escape: bool) -> None:
        # Explicit stack: end tags are pushed as strings below the children.
        stack: list[HtmlTag | str] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, str):
                parts.append(node)
                continue
            parts.append(node._start_tag(escape))
            if node._void:
                continue
            if node._body is not None:
                parts.append(html.escape(node._body, quote=False) if escape else node._body)
            stack.append(f"</{node._name}>")
            stack.extend(reversed(node._children))

    def _start_tag(self, escape: bool) -> str:
        parts = [f"<{self._name}"]
        for key, value in self._attributes.items():
            if escape:
                value = html.escape(value, quote=True)
            parts.append(f' {key}="{value}"')
        if self._classes:
            class_value = " ".join(self._classes)
            if escape:
                class_value = html.escape(class_value, quote=True)
            parts.append(f' class="{class_value}"')
        parts.append(">")
        return "".join(parts)

    # ==================== Inspection ====================

    def walk(self, _prefix: str = '') -> Iterator[tuple[str, HtmlTag]]:
        """Yield ``(path, tag)`` for every descendant, depth-first.

        Paths are dotted labels made of the tag name and its index among
        siblings with the same name, e.g. ``'ul_0.li_2'``.

        Example:
            >>> ul = HtmlTag('ul').add_children(HtmlTag('li'), HtmlTag('li'))
            >>> [path for path, _ in ul.walk()]
            ['li_0', 'li_1']
        """
        stack = self._labelled_children(_prefix)
        stack.reverse()
        while stack:
            path, node = stack.pop()
            yield path, node
            stack.extend(reversed(node._labelled_children(path)))

    def _labelled_children(self, prefix: str) -> list[tuple[str, HtmlTag]]:
        counts: dict[str, int] = {}
        labelled = []
        for child in self._children:
            n = counts.get(child._name, 0)
            counts[child._name] = n + 1
            label = f"{child._name}_{n}"
            labelled.append((f"{prefix}.{label}" if prefix else label, child))
        return labelled

    def check(self) -> list[str]:
        """Check the tree for content placed on void tags.

        Void tags never render their body or children, so such content
        would be silently dropped.

        Returns:
            List of problem descriptions (empty if none).
        """
        errors = []
        nodes = [(self._name, self)]
        nodes.extend(self.walk(self._name))
        for path, node in nodes:
            if not node._void:
                continue
            if node._body is not None:
                errors.append(f"'{path}' is void and cannot have a body")
            if node._children:
                errors.append(
                    f"'{path}' is void and cannot have children, "
                    f"but has {len(node._children)}"
                )
        for error in errors:
            logger.debug("check: %s", error)
        return errors


def _make_attribute_setter(attr: str) -> Callable[[HtmlTag, Any], HtmlTag]:
    def setter(self: HtmlTag, value: Any) -> HtmlTag:
        return self.add_attribute(attr, value)

    setter.__name__ = f"set_{attr}"
    setter.__qualname__ = f"HtmlTag.set_{attr}"
    setter.__doc__ = f"Set the ``{attr}`` attribute. Same as add_attribute('{attr}', value)."
    return setter


def _make_attribute_copier(attr: str) -> Callable[[HtmlTag, Any], HtmlTag]:
    def copier(self: HtmlTag, value: Any) -> HtmlTag:
        return self.copy().add_attribute(attr, value)

    copier.__name__ = f"with_{attr}"
    copier.__qualname__ = f"HtmlTag.with_{attr}"
    copier.__doc__ = f"Return a copy with the ``{attr}`` attribute set."
    return copier


for _attr in SHORTCUT_ATTRIBUTES:
    setattr(HtmlTag, f"set_{_attr}", _make_attribute_setter(_attr))
    setattr(HtmlTag, f"with_{_attr}", _make_attribute_copier(_attr))
del _attr
