# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for HtmlPage."""

from genro_htmltag import HtmlPage, HtmlTag, StyleSheet, h


class TestHtmlPage:
    """Tests for full document rendering."""

    def test_empty_page(self):
        """Test an empty page has doctype, head and body."""
        assert HtmlPage().to_html() == (
            '<!DOCTYPE html><html><head></head><body></body></html>'
        )

    def test_title_and_lang(self):
        """Test title goes first in head and lang on html."""
        page = HtmlPage(title='My Page', lang='en')
        page.head.add_child(h.meta(charset='utf-8'))
        assert page.to_html() == (
            '<!DOCTYPE html><html lang="en"><head><title>My Page</title>'
            '<meta charset="utf-8"></head><body></body></html>'
        )

    def test_title_does_not_change_head(self):
        """Test rendering does not insert the title into head."""
        page = HtmlPage(title='T')
        page.to_html()
        page.to_html()
        assert len(page.head) == 0

    def test_body_content(self):
        """Test body children render in order."""
        page = HtmlPage()
        page.body.add_child(HtmlTag('div', id='main').add_child(HtmlTag('p', body='Hello World')))
        assert str(page) == (
            '<!DOCTYPE html><html><head></head>'
            '<body><div id="main"><p>Hello World</p></div></body></html>'
        )

    def test_escape(self):
        """Test escape is passed to the whole document."""
        page = HtmlPage(title='a & b')
        assert '<title>a &amp; b</title>' in page.to_html(escape=True)

    def test_embed_style_sheet(self):
        """Test the style sheet is placed in head."""
        page = HtmlPage().embed_style_sheet(StyleSheet().add_style('p', 'margin', '0'))
        assert page.to_html() == (
            '<!DOCTYPE html><html><head><style>p {\n    margin: 0;\n}\n</style>'
            '</head><body></body></html>'
        )

    def test_check(self):
        """Test problems from head and body are collected."""
        page = HtmlPage()
        page.body.add_child(h.br().set_body('x'))
        assert page.check() == ["'body.br_0' is void and cannot have a body"]

    def test_print_tree(self, capsys):
        """Test the debug tree printout."""
        page = HtmlPage()
        page.body.add_child(h.ul(h.li('one'), id='list'))
        page.print_tree()
        out = capsys.readouterr().out
        assert 'HEAD' in out
        assert 'BODY' in out
        assert '<ul [id="list"]>' in out
        assert '  <li>: "one"' in out
