# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlGrammar - a small HTML vocabulary for TagBuilder.

A document has at most one head and one body, a head at most one title.
Flow and phrasing tags repeat freely. Attribute legality is not checked.

Example:
    Creating an HTML document::

        from genro_tagtree.builders import html, NEWLINE

        with html(lang='en') as doc:
            with doc.head() as head:
                head.title('An experiment')
            with doc.body() as body:
                body.text('My Contents', NEWLINE)
                body.p(class_='note').a('Unibo Website', href='http://www.unibo.it')
                body.ul('first', 'second')

        print(doc.render())
"""

from __future__ import annotations

from typing import Any

from ..builder import TagBuilder
from ..grammar import Grammar, element
from ..node import AttributeSource

NEWLINE = "<br />"


class HtmlGrammar(Grammar):
    """Grammar for HTML documents."""

    @property
    def document(self) -> dict[str, str]:
        return dict(tag='html', repeat='?')

    @property
    def sections(self) -> dict[str, str]:
        return dict(tag='head,body', repeat='?')

    @property
    def metadata(self) -> dict[str, str]:
        return dict(tag='title', repeat='?')

    @property
    def head_content(self) -> dict[str, str]:
        return dict(tag='meta,link,style,script')

    @property
    def flow(self) -> dict[str, str]:
        return dict(
            tag='div,p,section,article,nav,header,footer,main,'
                'h1,h2,h3,h4,h5,h6,table,tr,td,th,li,pre,blockquote',
        )

    @property
    def phrasing(self) -> dict[str, str]:
        return dict(tag='a,span,em,strong,code,img,br')

    @element(tag='ul,ol')
    def ul(self, node: TagBuilder, *items: str) -> None:
        """Each positional argument becomes an li item."""
        for item in items:
            node.li(item)


def html(attributes: AttributeSource = None, **attr: Any) -> TagBuilder:
    """Create the root builder of an HTML document.

    Example:
        >>> doc = html(lang='en')
        >>> doc.tag.attr['lang']
        'en'
    """
    return TagBuilder.root('html', HtmlGrammar, attributes, **attr)
