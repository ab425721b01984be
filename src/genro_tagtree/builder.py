# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TagBuilder - fluent construction of TagTree documents."""

from __future__ import annotations

from typing import Any, Callable

from .config import RenderConfig
from .exceptions import UnknownTagError
from .grammar import Grammar
from .node import AttributeSource, Tag, TagKind, Text
from .render import render


def _clean_attr(attr: dict[str, Any]) -> dict[str, str]:
    """Drop one trailing underscore from keyword names (class_ -> class)."""
    return {(k[:-1] if k.endswith('_') else k): v for k, v in attr.items()}


class TagBuilder:
    """Builder wrapping a Tag, with optional grammar-driven tag methods.

    Every child created through the builder goes through Tag.register(),
    so the repeat rule of each kind is enforced as the tree grows.

    Can be used in two ways:

    1. Plain, with explicit kinds:

        >>> root = TagBuilder(Tag('html'))
        >>> head = root.child('head')
        >>> head.child('title', 'An experiment')
        >>> root.child(TagKind('p', repeatable=True), 'Hello')

    2. With a Grammar for dynamic tag methods and nested ``with`` blocks:

        >>> with TagBuilder(Tag('html'), grammar=HtmlGrammar) as doc:
        ...     with doc.head() as head:
        ...         head.title('An experiment')
        ...     doc.body().text('My Contents')
        >>> print(doc.render())
    """

    __slots__ = ('_tag', '_grammar')

    def __init__(
        self,
        tag: Tag,
        grammar: type[Grammar] | Grammar | None = None,
    ) -> None:
        """Initialize a TagBuilder.

        Args:
            tag: The Tag this builder adds children to.
            grammar: A Grammar class or instance defining known tags.
        """
        self._tag = tag
        if isinstance(grammar, type):
            self._grammar: Grammar | None = grammar()
        else:
            self._grammar = grammar

    @classmethod
    def root(
        cls,
        kind: TagKind | str,
        grammar: type[Grammar] | Grammar | None = None,
        attributes: AttributeSource = None,
        **attr: Any
    ) -> TagBuilder:
        """Create a builder around a new root Tag.

        Example:
            >>> doc = TagBuilder.root('html', HtmlGrammar, lang='en')
        """
        if isinstance(grammar, type):
            grammar = grammar()
        if isinstance(kind, str) and grammar is not None:
            kind = grammar.get_kind(kind) or kind
        return cls(Tag(kind, attributes, **_clean_attr(attr)), grammar=grammar)

    def __repr__(self) -> str:
        return f"TagBuilder({self._tag!r})"

    def __enter__(self) -> TagBuilder:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None

    @property
    def tag(self) -> Tag:
        """The Tag being built."""
        return self._tag

    @property
    def grammar(self) -> Grammar | None:
        """The grammar instance.

        Use this to reach tag methods whose names clash with builder
        methods, e.g. ``builder.child(builder.grammar.get_kind('text'))``.
        """
        return self._grammar

    def __getattr__(self, name: str) -> Any:
        """Dynamic tag method access via grammar.

        Real methods on TagBuilder take precedence (e.g. text(), render()).
        """
        if not name.startswith('_') and self._grammar is not None:
            config = self._grammar.get_config(name)
            if config is not None:
                return self._make_tag_method(config)

        raise UnknownTagError(
            f"'{type(self).__name__}' object has no attribute or tag '{name}'"
        )

    def _make_tag_method(
        self, config: dict[str, Any]
    ) -> Callable[..., TagBuilder]:
        """Create a tag method for dynamic grammar access."""
        kind: TagKind = config['kind']
        custom_method = config.get('method')

        def tag_method(
            *texts: str, attributes: AttributeSource = None, **attr: Any
        ) -> TagBuilder:
            if custom_method is None:
                return self.child(kind, *texts, attributes=attributes, **attr)
            child = self.child(kind, attributes=attributes, **attr)
            custom_method(self._grammar, child, *texts)
            return child

        return tag_method

    def child(
        self,
        kind: TagKind | str,
        *texts: str,
        attributes: AttributeSource = None,
        **attr: Any
    ) -> TagBuilder:
        """Create and register a child Tag, returning its builder.

        Args:
            kind: A TagKind, or a tag name. Names known to the grammar use
                the grammar's kind, other names get a unique kind.
            *texts: Text leaves registered inside the new child.
            attributes: Mapping or iterable of (name, value) pairs.
            **attr: More attributes; a trailing underscore is dropped
                (``class_='x'`` becomes ``class="x"``).

        Raises:
            StructuralConflict: If the kind is unique and already present.
        """
        if isinstance(kind, str) and self._grammar is not None:
            kind = self._grammar.get_kind(kind) or kind
        node = Tag(kind, attributes, **_clean_attr(attr))
        self._tag.register(node)
        builder = TagBuilder(node, grammar=self._grammar)
        builder.text(*texts)
        return builder

    def text(self, *values: str) -> TagBuilder:
        """Register one text leaf per value. Returns self for chaining."""
        for value in values:
            self._tag.register(Text(value))
        return self

    def render(self, indent: str = "", config: RenderConfig | None = None) -> str:
        """Render the built Tag. See render.render()."""
        return render(self._tag, indent, config)
