# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StyleSheet - CSS rules keyed by selector.

Selectors and properties are kept sorted, so the generated CSS does not
depend on the order in which rules were added.

Example:
    >>> sheet = StyleSheet()
    >>> sheet.add_style('.wow', 'color', 'red').add_style('h1', 'color', 'blue')
    StyleSheet(['.wow', 'h1'])
    >>> print(sheet.to_css())
    .wow {
        color: red;
    }
    h1 {
        color: blue;
    }
    <BLANKLINE>
"""

from __future__ import annotations

import copy
from typing import Iterator, Mapping


class StyleSheet:
    """A mapping of CSS selector to ``{property: value}``.

    Like HtmlTag, every mutator comes in two flavours: ``add_*`` changes
    the sheet and returns it, ``with_*`` returns a changed copy.
    """

    __slots__ = ('_rules',)

    def __init__(self, rules: Mapping[str, Mapping[str, str]] | None = None) -> None:
        """Initialize a StyleSheet.

        Args:
            rules: Optional initial ``{selector: {property: value}}`` mapping.
        """
        self._rules: dict[str, dict[str, str]] = {}
        if rules:
            for selector, properties in rules.items():
                self.add_rule(selector, properties)

    def __repr__(self) -> str:
        return f"StyleSheet({sorted(self._rules)})"

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._rules))

    def __contains__(self, selector: str) -> bool:
        return selector in self._rules

    def __getitem__(self, selector: str) -> dict[str, str]:
        return dict(self._rules[selector])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleSheet):
            return NotImplemented
        return self._rules == other._rules

    __hash__ = None  # type: ignore[assignment]

    def add_style(self, selector: str, prop: str, value: str) -> StyleSheet:
        """Set a single property for a selector, creating the selector if needed."""
        self._rules.setdefault(selector, {})[prop] = str(value)
        return self

    def add_rule(self, selector: str, properties: Mapping[str, str]) -> StyleSheet:
        """Merge a mapping of properties into a selector.

        Existing properties of the selector are overwritten, others are kept.
        """
        current = self._rules.setdefault(selector, {})
        for prop, value in properties.items():
            current[prop] = str(value)
        return self

    def with_style(self, selector: str, prop: str, value: str) -> StyleSheet:
        return self.copy().add_style(selector, prop, value)

    def with_rule(self, selector: str, properties: Mapping[str, str]) -> StyleSheet:
        return self.copy().add_rule(selector, properties)

    def copy(self) -> StyleSheet:
        new = StyleSheet()
        new._rules = copy.deepcopy(self._rules)
        return new

    def to_css(self) -> str:
        """Render the sheet as CSS text, one block per selector."""
        parts = []
        for selector in sorted(self._rules):
            parts.append(f"{selector} {{\n")
            properties = self._rules[selector]
            for prop in sorted(properties):
                parts.append(f"    {prop}: {properties[prop]};\n")
            parts.append("}\n")
        return "".join(parts)

    def to_html(self) -> str:
        """Render the sheet wrapped in a ``<style>`` block."""
        return f"<style>\n{self.to_css()}</style>\n"

    def __str__(self) -> str:
        return self.to_css()


def convert_to_styles(properties: Mapping[str, str]) -> str:
    """Turn a property mapping into an inline ``style`` attribute value.

    Example:
        >>> convert_to_styles({'font-size': '12px', 'color': 'red'})
        'color: red;font-size: 12px;'
    """
    return "".join(f"{key}: {properties[key]};" for key in sorted(properties))


def sanitize_styles(styles: str) -> str:
    """Remove newlines, tabs and spaces from a CSS fragment."""
    return styles.replace("\n", "").replace("\t", "").replace(" ", "")
