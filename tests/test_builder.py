# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for TagBuilder."""

import logging

import pytest

from genro_htmltag import HtmlTag, InvalidTagNameError, TagBuilder, h


class TestTagBuilder:
    """Tests for the dynamic tag factory."""

    def test_simple_tag(self):
        """Test h.<name>() builds an empty tag."""
        tag = h.div()
        assert isinstance(tag, HtmlTag)
        assert tag.to_html() == '<div></div>'

    def test_body_and_attributes(self):
        """Test string content becomes the body and keywords attributes."""
        tag = h.a('Home', href='/', class_='nav')
        assert tag.to_html() == '<a href="/" class="nav">Home</a>'

    def test_nested_children(self):
        """Test HtmlTag content becomes children in order."""
        tag = h.div(
            h.h1('Welcome'),
            h.ul(h.li('Item 1'), h.li('Item 2')),
            id='main',
        )
        assert tag.to_html() == (
            '<div id="main"><h1>Welcome</h1>'
            '<ul><li>Item 1</li><li>Item 2</li></ul></div>'
        )

    def test_multiple_strings_are_joined(self):
        """Test several string arguments are concatenated."""
        assert h.p('a', 'b').to_html() == '<p>ab</p>'

    def test_text_then_children(self):
        """Test mixed content renders the body before children."""
        assert h.p(h.br(), 'text').to_html() == '<p>text<br></p>'

    def test_void_elements(self):
        """Test void element names build void tags."""
        assert h.br().to_html() == '<br>'
        assert h.meta(charset='utf-8').to_html() == '<meta charset="utf-8">'
        assert h.IMG(src='/x.png').void

    def test_void_override(self):
        """Test void can be forced either way."""
        assert h.br(void=False).to_html() == '<br></br>'
        assert h.tag('x-icon', void=True).to_html() == '<x-icon>'

    def test_tag_with_dashed_name(self):
        """Test tag() builds names that are not identifiers."""
        tag = h.tag('my-widget', 'x', data_id='1')
        assert tag.to_html() == '<my-widget data_id="1">x</my-widget>'

    def test_invalid_content_raises(self):
        """Test only strings and tags are accepted as content."""
        with pytest.raises(TypeError, match="must be str or HtmlTag"):
            h.p(42)

    def test_invalid_name_raises(self):
        """Test invalid tag names fail like HtmlTag does."""
        with pytest.raises(InvalidTagNameError):
            h.tag('1bad')

    def test_private_names_raise(self):
        """Test underscore names are not tag factories."""
        with pytest.raises(AttributeError):
            h._private

    def test_independent_instances(self):
        """Test a new TagBuilder behaves like the shared one."""
        assert TagBuilder().span('x') == h.span('x')

    def test_custom_tag_logged(self, caplog):
        """Test custom tags are reported at debug level."""
        with caplog.at_level(logging.DEBUG, logger='genro_htmltag.builder'):
            h.tag('my-widget')
        assert "custom tag 'my-widget'" in caplog.text

    def test_name_keyword_is_attribute(self):
        """Test name= becomes the name attribute."""
        assert h.input(name='q', type='text').to_html() == '<input name="q" type="text">'
        assert h.meta(name='viewport', content='x').to_html() == (
            '<meta name="viewport" content="x">'
        )

    def test_every_keyword_is_attribute(self):
        """Test classes= and body= are plain attributes through the builder."""
        assert h.div(classes='x').to_html() == '<div classes="x"></div>'
        assert h.p(body='b').to_html() == '<p body="b"></p>'
