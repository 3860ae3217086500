# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTag exceptions."""

from __future__ import annotations


class HtmlTagError(Exception):
    """Base exception for HtmlTag errors."""

    pass


class InvalidTagNameError(HtmlTagError, ValueError):
    """Raised when a tag is created with an empty or malformed name."""

    pass


class InvalidChildError(HtmlTagError):
    """Raised when a child would make the tag tree cyclic."""

    pass
