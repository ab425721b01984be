# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagTree exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Element, TagKind


class TagTreeError(Exception):
    """Base exception for TagTree errors."""

    pass


class StructuralConflict(TagTreeError):
    """Raised when a second child of the same unique kind is registered.

    Attributes:
        kind: The TagKind that already has a representative in the parent.
        child: The rejected element.
    """

    def __init__(self, kind: TagKind, child: Element) -> None:
        self.kind = kind
        self.child = child
        super().__init__(
            f"cannot repeat tag '{kind.name}' multiple times:\n{child!r}"
        )


class OwnershipError(TagTreeError):
    """Raised when a child already has a parent or would create a cycle.

    Attributes:
        child: The rejected element.
    """

    def __init__(self, child: Element, message: str) -> None:
        self.child = child
        super().__init__(message)


class UnknownTagError(TagTreeError, AttributeError):
    """Raised when a builder is asked for a tag its grammar does not define."""

    pass
