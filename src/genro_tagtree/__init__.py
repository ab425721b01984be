# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TagTree - Markup trees with unique/repeatable children and text rendering.

A lightweight, zero-dependency library for assembling HTML-like documents
and rendering them as indented text.
"""

__version__ = "0.1.0"

from .builder import TagBuilder
from .config import RenderConfig, render_config_context
from .exceptions import (
    OwnershipError,
    StructuralConflict,
    TagTreeError,
    UnknownTagError,
)
from .grammar import Grammar, element
from .node import TEXT_KIND, Element, Tag, TagKind, Text, construct, register
from .render import format_attributes, render

__all__ = [
    # Core classes
    "Element",
    "Tag",
    "TagKind",
    "Text",
    "TEXT_KIND",
    # Core operations
    "construct",
    "register",
    "render",
    "format_attributes",
    # Configuration
    "RenderConfig",
    "render_config_context",
    # Builder
    "TagBuilder",
    "Grammar",
    "element",
    # Exceptions
    "TagTreeError",
    "StructuralConflict",
    "OwnershipError",
    "UnknownTagError",
]
