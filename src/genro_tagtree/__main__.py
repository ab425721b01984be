# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Print a demonstration HTML document.

Usage::

    python -m genro_tagtree
    python -m genro_tagtree --indent 2
"""

from __future__ import annotations

import argparse
import sys

from .builder import TagBuilder
from .builders.html import NEWLINE, html
from .config import RenderConfig
from .exceptions import StructuralConflict
from .utils.logger import get_logger

logger = get_logger(__name__)


def build_document() -> TagBuilder:
    """Assemble the demonstration document."""
    with html(lang='en') as doc:
        with doc.head() as head:
            head.title('An experiment')
        with doc.body() as body:
            body.text('My Contents', NEWLINE, 'This contents are less important')
    return doc


def _indent_unit(value: str) -> str:
    if value == 'tab':
        return '\t'
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected 'tab' or a number of spaces, got {value!r}"
        ) from None
    if width < 0:
        raise argparse.ArgumentTypeError("number of spaces cannot be negative")
    return ' ' * width


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='genro_tagtree',
        description='Render a demonstration HTML document.',
    )
    parser.add_argument(
        '--indent',
        type=_indent_unit,
        default='tab',
        help="indentation unit: 'tab' (default) or a number of spaces",
    )
    args = parser.parse_args(argv)

    try:
        document = build_document()
    except StructuralConflict as exc:
        logger.debug("Document construction aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(document.render(config=RenderConfig(indent_unit=args.indent)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
