# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlTag - Build HTML markup with chained method calls.

A lightweight, zero-dependency library for composing HTML fragments as a
tree of tags instead of concatenating strings, for the Genro ecosystem
(Genro Kyō).

Example:
    >>> from genro_htmltag import HtmlTag
    >>> a = HtmlTag('a').set_href('https://example.com').set_body('Hello World')
    >>> a.add_class('test').to_html()
    '<a href="https://example.com" class="test">Hello World</a>'

Security:
    Output is NOT escaped by default. Escape untrusted values yourself or
    render with ``to_html(escape=True)``.
"""

import logging

__version__ = "0.1.0"

from .builder import TagBuilder, h
from .exceptions import (
    HtmlTagError,
    InvalidChildError,
    InvalidTagNameError,
)
from .node import HtmlTag
from .page import HtmlPage
from .styles import StyleSheet, convert_to_styles, sanitize_styles
from .tags import KNOWN_TAGS, VOID_ELEMENTS, TagType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "HtmlTag",
    "TagType",
    "HtmlPage",
    # Builder
    "TagBuilder",
    "h",
    # Styles
    "StyleSheet",
    "convert_to_styles",
    "sanitize_styles",
    # Constants
    "KNOWN_TAGS",
    "VOID_ELEMENTS",
    # Exceptions
    "HtmlTagError",
    "InvalidTagNameError",
    "InvalidChildError",
]
