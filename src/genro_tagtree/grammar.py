# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Grammar system declaring the tag vocabulary of a TagBuilder."""

from __future__ import annotations

from typing import Any, Callable

from .node import TagKind


def _parse_repeat_symbol(spec: str) -> bool:
    """Parse a repeat specification into the ``repeatable`` flag.

    Supports:
        - '*' or '0:' = any number among siblings (repeatable)
        - '?', '1' or '0:1' = at most one among siblings (unique)

    Raises:
        ValueError: For any other spec.
    """
    spec = spec.strip()
    if spec in ('*', '0:'):
        return True
    if spec in ('?', '1', '0:1'):
        return False
    raise ValueError(f"Invalid repeat spec: '{spec}'")


def element(tag: str | None = None, repeat: str = '*') -> Callable:
    """Decorator for grammar element methods with custom logic.

    The method is called after the node has been created and registered.
    It receives the new node's builder and the positional arguments passed
    to the tag method.

    Args:
        tag: Tag name(s), comma-separated for aliases. If None, uses method name.
        repeat: Repeat spec, see _parse_repeat_symbol().

    Example:
        class ListGrammar(Grammar):
            @element(tag='ul,ol')
            def ul(self, node, *items):
                for item in items:
                    node.li(item)
    """
    def decorator(func: Callable) -> Callable:
        func._element_config = {
            'tag': tag,
            'repeat': repeat,
            'method': func,
        }
        return func

    return decorator


class Grammar:
    """Base class for defining tag vocabularies.

    Grammars declare tags and their repeat rule using:
    - Properties that return dicts for groups of similar tags
    - @element decorated methods for tags with custom logic

    Example:
        class PageGrammar(Grammar):
            @property
            def sections(self):
                return dict(tag='head,body', repeat='?')

            @property
            def flow(self):
                return dict(tag='div,p,span')

            @element(tag='ul,ol')
            def ul(self, node, *items):
                for item in items:
                    node.li(item)
    """

    def __init__(self) -> None:
        self._tag_to_config: dict[str, dict[str, Any]] = {}
        self._resolve_all()

    def _resolve_all(self) -> None:
        """Collect definitions from properties and decorated methods."""
        for name in dir(type(self)):
            if name.startswith('_'):
                continue

            attr = getattr(type(self), name, None)

            if callable(attr) and hasattr(attr, '_element_config'):
                config = attr._element_config.copy()
                self._store_config(config.get('tag') or name, config)
                continue

            if isinstance(attr, property):
                value = getattr(self, name)
                if isinstance(value, dict) and 'tag' in value:
                    self._store_config(value['tag'], value.copy())

    def _store_config(self, tags: str, config: dict[str, Any]) -> None:
        """Store configuration for one or more tags."""
        repeatable = _parse_repeat_symbol(config.get('repeat', '*'))
        for tag in (t.strip() for t in tags.split(',')):
            tag_config = config.copy()
            tag_config['kind'] = TagKind(tag, repeatable)
            self._tag_to_config[tag] = tag_config

    def get_config(self, tag: str) -> dict[str, Any] | None:
        """Get configuration for a tag."""
        return self._tag_to_config.get(tag)

    def get_kind(self, tag: str) -> TagKind | None:
        """Get the TagKind declared for a tag."""
        config = self._tag_to_config.get(tag)
        return config['kind'] if config else None

    def get_method(self, tag: str) -> Callable | None:
        """Get the custom method for a tag, if any."""
        config = self._tag_to_config.get(tag)
        if config and 'method' in config:
            return config['method']
        return None

    def get_all_tags(self) -> list[str]:
        """Get all defined tags."""
        return list(self._tag_to_config.keys())

