# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Styled page - a StyleSheet embedded in a tag and in a full page."""

from __future__ import annotations

from genro_htmltag import HtmlPage, HtmlTag, StyleSheet, h


def build_sheet() -> StyleSheet:
    sheet = StyleSheet()
    sheet.add_style('.wow', 'color', 'red')
    sheet.add_style('.wow', 'font-size', '20px')
    sheet.add_style('.wow', 'font-family', 'sans-serif')
    sheet.add_style('h1', 'color', 'blue')
    sheet.add_style('h1', 'font-size', '30px')
    return sheet


if __name__ == '__main__':
    sheet = build_sheet()
    print(sheet.to_css())
    print(sheet.to_html())

    div = (
        HtmlTag('div')
        .with_id('wow')
        .with_style_sheet(sheet)
        .with_child(HtmlTag('h1').with_class('wow').with_body('Hello World'))
    )
    print(div.to_html())

    page = HtmlPage(title='Styled', lang='en').embed_style_sheet(sheet)
    page.body.add_child(h.h1('Hello World', class_='wow'))
    print(page.to_html())
