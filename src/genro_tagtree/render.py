# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Text rendering of TagTree elements.

A Tag renders as an opening line, the lines of its children indented one
unit deeper, and a closing line::

    <html lang="en">
    	<body>
    		Hello
    	</body>
    </html>

Every line ends with a single newline. Lines are composed structurally, so
an empty child block never leaves a blank line behind. Text content is
emitted verbatim, except that line breaks become a single ``\\n`` and one
trailing line break is dropped.
"""

from __future__ import annotations

from typing import Iterator, Mapping

from .config import RenderConfig, get_render_config
from .node import Element
from .utils.logger import get_logger

logger = get_logger(__name__)


def format_attributes(attr: Mapping[str, str]) -> str:
    """Format attributes as the suffix of an opening tag.

    Returns ``''`` for no attributes, otherwise a leading space followed by
    space-separated ``name="value"`` pairs. Values are not escaped.

    Example:
        >>> format_attributes({'lang': 'en'})
        ' lang="en"'
    """
    if not attr:
        return ""
    return " " + " ".join(f'{name}="{value}"' for name, value in attr.items())


def _normalize_text(text: str) -> str:
    """Use \\n as the only line break and drop one trailing line break."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if text.endswith("\n"):
        text = text[:-1]
    return text


def iter_lines(node: Element, indent: str = "", unit: str = "\t") -> Iterator[str]:
    """Yield the lines of ``node`` and its subtree, without line endings.

    Args:
        node: The element to render.
        indent: Indentation of the node's own opening and closing lines.
        unit: Indentation added per nesting level.
    """
    if node.is_leaf:
        text = _normalize_text(node.text)
        # empty text is a structural blank line
        if text:
            yield f"{indent}{text}"
        return

    yield f"{indent}<{node.name}{format_attributes(node.attr)}>"
    child_indent = indent + unit
    for child in node.children:
        yield from iter_lines(child, child_indent, unit)
    yield f"{indent}</{node.name}>"


def render(
    node: Element, indent: str = "", config: RenderConfig | None = None
) -> str:
    """Render ``node`` and its subtree to text.

    Args:
        node: A Tag or Text.
        indent: Indentation prefix of the node's own lines.
        config: Render options. Defaults to the context config
            (see genro_tagtree.config).

    Returns:
        The rendered text; each line ends with ``'\\n'``.
    """
    if config is None:
        config = get_render_config()
    text = "".join(f"{line}\n" for line in iter_lines(node, indent, config.indent_unit))
    logger.debug("Rendered %r into %d characters", node, len(text))
    return text
