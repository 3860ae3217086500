# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlPage - a complete HTML document with head and body."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .node import HtmlTag

if TYPE_CHECKING:
    from .styles import StyleSheet

logger = logging.getLogger(__name__)


class HtmlPage:
    """HTML page with separate head and body trees.

    Usage:
        >>> page = HtmlPage(title='My Page')
        >>> page.head.add_child(HtmlTag('meta', void=True, charset='utf-8'))
        HtmlTag('head', children=1)
        >>> page.body.add_child(HtmlTag('p', body='Hello World'))
        HtmlTag('body', children=1)
        >>> page.to_html()
        '<!DOCTYPE html><html><head><title>My Page</title><meta charset="utf-8"></head><body><p>Hello World</p></body></html>'
    """

    def __init__(self, title: str | None = None, lang: str | None = None):
        """Initialize the page with empty head and body.

        Args:
            title: Optional document title, rendered first in head.
            lang: Optional ``lang`` attribute of the html element.
        """
        self.title = title
        self.lang = lang
        self.head = HtmlTag('head')
        self.body = HtmlTag('body')

    def __repr__(self) -> str:
        return f"HtmlPage(title={self.title!r})"

    def __str__(self) -> str:
        return self.to_html()

    def embed_style_sheet(self, sheet: StyleSheet) -> HtmlPage:
        """Append a ``<style>`` block with the sheet's CSS to head."""
        self.head.embed_style_sheet(sheet)
        return self

    def to_html(self, escape: bool = False) -> str:
        """Generate the complete document.

        Args:
            escape: Passed to HtmlTag.to_html().

        Returns:
            ``<!DOCTYPE html>`` followed by the html element.
        """
        root = HtmlTag('html')
        if self.lang:
            root.add_attribute('lang', self.lang)
        head = self.head
        if self.title is not None:
            head = self.head.copy()
            head._children.insert(0, HtmlTag('title', body=self.title))
        # head and body stay owned by the page; the root is only rendered.
        root._children.extend([head, self.body])
        return "<!DOCTYPE html>" + root.to_html(escape=escape)

    def check(self) -> list[str]:
        """Return structure problems found in head and body."""
        errors = self.head.check() + self.body.check()
        if errors:
            logger.debug("HtmlPage has %d structure problem(s)", len(errors))
        return errors

    def print_tree(self) -> None:
        """Print the tree structure for debugging."""
        for section in (self.head, self.body):
            print("=" * 60)
            print(section.name.upper())
            print("=" * 60)
            for path, node in section.walk():
                indent_level = "  " * path.count(".")
                attrs = " ".join(f'{k}="{v}"' for k, v in node.attributes.items())
                attrs_str = f" [{attrs}]" if attrs else ""
                value_str = f': "{node.body}"' if node.body else ""
                print(f"{indent_level}<{node.name}{attrs_str}>{value_str}")
