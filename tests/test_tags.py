# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for TagType."""

from genro_htmltag import KNOWN_TAGS, VOID_ELEMENTS, TagType


class TestTagType:
    """Tests for TagType lookup and rendering."""

    def test_from_name_known(self):
        """Test well-known names map to the class constants."""
        assert TagType.from_name('p') == TagType.P
        assert TagType.from_name('DIV') == TagType.DIV
        assert not TagType.P.is_custom

    def test_from_name_custom(self):
        """Test unknown names become lowercased custom tags."""
        tag = TagType.from_name('My-Widget')
        assert tag.is_custom
        assert tag.html() == 'my-widget'

    def test_constructor_lowercases(self):
        """Test the constructor normalizes case like from_name."""
        assert TagType('P') == TagType.P
        assert TagType('My-Widget').html() == 'my-widget'

    def test_html_and_str(self):
        """Test html() and str() return the tag name."""
        assert TagType.H1.html() == 'h1'
        assert str(TagType.TABLE) == 'table'
        assert repr(TagType.A) == "TagType('a')"

    def test_is_void(self):
        """Test void detection."""
        assert TagType.IMG.is_void
        assert not TagType.DIV.is_void

    def test_hashable(self):
        """Test tag types work as set members and dict keys."""
        tags = {TagType.P, TagType.from_name('p'), TagType.DIV}
        assert len(tags) == 2

    def test_known_tags(self):
        """Test the well-known tag set."""
        assert {'p', 'div', 'span', 'a', 'img', 'table', 'tr', 'td', 'th'} <= KNOWN_TAGS
        assert {f'h{i}' for i in range(1, 7)} <= KNOWN_TAGS
        assert 'br' in VOID_ELEMENTS
        assert 'div' not in VOID_ELEMENTS


class TestTagTypeOrdering:
    """Tests for TagType sort order."""

    def test_ordering(self):
        """Test sorting then reversing gives div first and p last."""
        custom = TagType.from_name('custom')
        tags = [
            TagType.P, TagType.DIV, TagType.SPAN, TagType.A,
            TagType.H1, TagType.H2, TagType.H3, TagType.H4, TagType.H5, TagType.H6,
            TagType.IMG, custom,
        ]
        tags.sort()
        tags.reverse()
        assert tags == [
            TagType.DIV,
            TagType.H1, TagType.H2, TagType.H3, TagType.H4, TagType.H5, TagType.H6,
            TagType.IMG,
            custom,
            TagType.A,
            TagType.SPAN,
            TagType.P,
        ]

    def test_comparisons(self):
        """Test the comparison operators."""
        assert TagType.P < TagType.DIV
        assert TagType.DIV > TagType.H1
        assert TagType.H1 >= TagType.H1
        assert TagType.SPAN <= TagType.A

    def test_custom_tags_are_unordered(self):
        """Test two custom tags compare by rank only."""
        x = TagType.from_name('x-one')
        y = TagType.from_name('x-two')
        assert x != y
        assert not x < y
        assert not x > y
        assert x <= y and x >= y
