# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""People list - mixing the in-place and copy-returning APIs."""

from __future__ import annotations

from genro_htmltag import HtmlTag


def build(names: list[str]) -> HtmlTag:
    main = HtmlTag('div').with_id('main').with_style('color: red;')

    for i, name in enumerate(names):
        p = HtmlTag('p').with_id(f'p-{i}').with_class('person')
        p.set_body(f'{i + 1}. {name}')
        main.add_child(p)

    return main


if __name__ == '__main__':
    print(build(['Ram', 'Jake', 'John', 'Jill', 'Jenny']).to_html())
