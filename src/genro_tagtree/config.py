# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ContextVar-scoped render configuration.

``render()`` uses an explicit config when one is passed, otherwise the one
set for the current context, otherwise the defaults.

Usage::

    from genro_tagtree.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(indent_unit="  ")):
        text = document.render()
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any, Iterator, Mapping

DEFAULT_INDENT = "\t"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        indent_unit: String appended to the indentation once per nesting
            level. Must not contain line breaks.
    """

    indent_unit: str = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if "\n" in self.indent_unit or "\r" in self.indent_unit:
            raise ValueError(
                f"indent_unit must not contain line breaks: {self.indent_unit!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Create a RenderConfig from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})


_DEFAULT_CONFIG = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config", default=_DEFAULT_CONFIG
)


def get_render_config() -> RenderConfig:
    """Return the render config for the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render config for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Restore the default render config for the current context."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[RenderConfig]:
    """Temporarily use ``config`` as the context render config."""
    token = _render_config.set(config)
    try:
        yield config
    finally:
        _render_config.reset(token)
