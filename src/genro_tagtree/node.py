# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagTree node classes.

A tree is made of two element types:

- Tag: a named node with attributes and ordered children
- Text: a leaf holding literal text

Every element carries a TagKind. The kind, not the Python class, decides
whether an element may appear more than once among the children of a
single parent.

Example:
    >>> html = construct('html', lang='en')
    >>> head = construct('head')
    >>> register(html, head)
    >>> register(html, construct('head'))
    Traceback (most recent call last):
        ...
    genro_tagtree.exceptions.StructuralConflict: cannot repeat tag 'head' ...
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from .exceptions import OwnershipError, StructuralConflict
from .utils.logger import get_logger

logger = get_logger(__name__)

AttributeSource = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


@dataclass(frozen=True, slots=True)
class TagKind:
    """Discriminator of an element: its tag name and repeat rule.

    Attributes:
        name: The markup tag name.
        repeatable: True if any number of elements of this kind may share
            a parent, False if at most one may.
    """

    name: str
    repeatable: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tag name cannot be empty")


TEXT_KIND = TagKind('#text', repeatable=True)


class Element:
    """Base class for everything that can be registered as a child."""

    __slots__ = ('kind', 'parent')

    kind: TagKind
    parent: Tag | None

    @property
    def repeatable(self) -> bool:
        """True if this element's kind may repeat among siblings."""
        return self.kind.repeatable

    @property
    def is_leaf(self) -> bool:
        """True for text leaves."""
        return False

    @property
    def is_branch(self) -> bool:
        """True for tags (elements that can hold children)."""
        return not self.is_leaf

    def render(self, indent: str = "") -> str:
        """Render this element and its subtree. See render.render()."""
        from .render import render
        return render(self, indent)


class Text(Element):
    """A childless leaf holding literal text. Always repeatable."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.kind = TEXT_KIND
        self.parent = None
        self.text = text

    def __repr__(self) -> str:
        return f"Text({self.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash((Text, self.text))

    @property
    def is_leaf(self) -> bool:
        return True


class Tag(Element):
    """A named markup element with attributes and ordered children.

    ``name`` and ``attr`` are fixed at construction. ``children`` is a
    read-only view; the only way to add a child is register().
    """

    __slots__ = ('_attr', '_children', '_unique_kinds')

    def __init__(
        self,
        kind: TagKind | str,
        attributes: AttributeSource = None,
        **attr: str,
    ) -> None:
        """Initialize a Tag.

        Args:
            kind: A TagKind, or a tag name for a unique kind of that name.
            attributes: Mapping or iterable of (name, value) pairs.
            **attr: More attributes, applied after ``attributes``.
                Later duplicates win.
        """
        self.kind = kind if isinstance(kind, TagKind) else TagKind(kind)
        final_attr: dict[str, str] = {}
        if attributes:
            final_attr.update(attributes)
        final_attr.update(attr)
        self._attr = MappingProxyType(final_attr)
        self.parent = None
        self._children: list[Element] = []
        self._unique_kinds: set[TagKind] = set()

    def __repr__(self) -> str:
        return (
            f"Tag({self.name!r}, attr={dict(self._attr)!r}, "
            f"children={len(self._children)})"
        )

    @property
    def name(self) -> str:
        """The tag name."""
        return self.kind.name

    @property
    def attr(self) -> Mapping[str, str]:
        """Read-only attribute mapping."""
        return self._attr

    @property
    def children(self) -> tuple[Element, ...]:
        """Children in registration order."""
        return tuple(self._children)

    def _is_ancestor_or_self(self, node: Element) -> bool:
        current: Tag | None = self
        while current is not None:
            if current is node:
                return True
            current = current.parent
        return False

    def register(self, child: Element) -> Element:
        """Append ``child``, enforcing ownership and the repeat rule.

        Args:
            child: The element to append.

        Returns:
            The registered child.

        Raises:
            OwnershipError: If ``child`` already has a parent, or is this
                tag or one of its ancestors.
            StructuralConflict: If ``child`` is of a unique kind and a child
                of the same kind is already present.

        Children are unchanged when an error is raised.
        """
        if child.parent is not None:
            raise OwnershipError(
                child, f"{child!r} already belongs to {child.parent!r}"
            )
        if self._is_ancestor_or_self(child):
            raise OwnershipError(
                child, f"registering {child!r} under {self!r} would create a cycle"
            )
        if not child.repeatable and child.kind in self._unique_kinds:
            logger.debug("Rejected duplicate %r under %r", child.kind.name, self.name)
            raise StructuralConflict(child.kind, child)
        self._children.append(child)
        if not child.repeatable:
            self._unique_kinds.add(child.kind)
        child.parent = self
        logger.debug("Registered %r under %r", child.kind.name, self.name)
        return child


def construct(
    name: TagKind | str,
    attributes: AttributeSource = None,
    repeatable: bool = False,
    **attr: str,
) -> Tag:
    """Build a Tag with no children.

    Args:
        name: Tag name, or a TagKind (then ``repeatable`` is ignored).
        attributes: Mapping or iterable of (name, value) pairs.
        repeatable: Repeat rule of the kind when ``name`` is a string.
        **attr: More attributes; later duplicates win.
    """
    kind = name if isinstance(name, TagKind) else TagKind(name, repeatable)
    return Tag(kind, attributes, **attr)


def register(parent: Tag, child: Element) -> None:
    """Append ``child`` to ``parent``. See Tag.register()."""
    parent.register(child)
