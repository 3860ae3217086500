# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagBuilder - shorthand factory for HtmlTag trees.

Any attribute of a TagBuilder is a factory for the tag of the same name,
so nested markup reads like the markup itself.

Example:
    >>> from genro_htmltag import h
    >>> page = h.div(
    ...     h.h1('Welcome'),
    ...     h.p('Hello, World!', class_='lead'),
    ...     h.ul(h.li('Item 1'), h.li('Item 2')),
    ...     id='main',
    ... )
    >>> page.to_html()
    '<div id="main"><h1>Welcome</h1><p class="lead">Hello, World!</p><ul><li>Item 1</li><li>Item 2</li></ul></div>'

Names that are not Python identifiers go through tag()::

    h.tag('my-widget', data_x='1')
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .node import HtmlTag
from .tags import KNOWN_TAGS, VOID_ELEMENTS

logger = logging.getLogger(__name__)


class TagBuilder:
    """Factory of HtmlTag instances, one dynamic method per tag name.

    Positional arguments of a tag method are its content: strings become
    the body (joined when there are several), HtmlTag instances become
    children in order. Keyword arguments are attributes, with the usual
    ``class_`` convention.

    Tags listed in VOID_ELEMENTS (br, img, meta...) are built void.
    """

    def __getattr__(self, name: str) -> Callable[..., HtmlTag]:
        """Dynamic method for any tag name.

        Args:
            name: Tag name (e.g., 'div', 'span', 'meta')

        Returns:
            Callable that creates a tag with that name.

        Raises:
            AttributeError: If name starts with an underscore.
        """
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        return self._make_tag_method(name)

    def _make_tag_method(self, name: str) -> Callable[..., HtmlTag]:
        """Create a method for a specific tag."""

        def tag_method(*content: Any, **attr: Any) -> HtmlTag:
            return self.tag(name, *content, **attr)

        tag_method.__name__ = name
        return tag_method

    def tag(self, _name: str, /, *content: Any, **attr: Any) -> HtmlTag:
        """Build a tag by name.

        Args:
            _name: Tag name.
            *content: Body strings and child HtmlTag instances.
            **attr: Attributes, all of them, including ``name``, ``body``
                and ``classes``. Only ``void`` is taken out: it forces or
                disables void rendering.

        Raises:
            InvalidTagNameError: If the name is not a valid tag name.
            TypeError: If content holds anything but strings and HtmlTag.
        """
        void = attr.pop('void', _name.lower() in VOID_ELEMENTS)
        if _name.lower() not in KNOWN_TAGS and _name.lower() not in VOID_ELEMENTS:
            logger.debug("Building custom tag '%s'", _name)

        texts: list[str] = []
        children: list[HtmlTag] = []
        for item in content:
            if isinstance(item, HtmlTag):
                children.append(item)
            elif isinstance(item, str):
                texts.append(item)
            else:
                raise TypeError(
                    f"Tag content must be str or HtmlTag, not {type(item).__name__}"
                )

        node = HtmlTag(_name, void=void).add_attributes(**attr)
        if texts:
            node.set_body("".join(texts))
        return node.add_children(*children)


h = TagBuilder()
