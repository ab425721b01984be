# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Domain-specific grammars for TagBuilder."""

from .html import NEWLINE, HtmlGrammar, html

__all__ = [
    'HtmlGrammar',
    'NEWLINE',
    'html',
]
