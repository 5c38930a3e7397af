"""Abstract markup tree.

The renderers produce a tree of immutable nodes carrying opaque style
markers. The tree is serialized to HTML by `to_html`, which escapes
every text leaf and attribute value.
"""

from .nodes import (
    Element,
    Fragment,
    Markup,
    Node,
    Page,
    a,
    b,
    code,
    div,
    frag,
    h1,
    h2,
    h3,
    i,
    li,
    pre,
    span,
    table,
    td,
    th,
    tr,
    ul,
)
from .serializer import to_html
from .styles import CSS

__all__ = (
    'CSS',
    'Element',
    'Fragment',
    'Markup',
    'Node',
    'Page',
    'a',
    'b',
    'code',
    'div',
    'frag',
    'h1',
    'h2',
    'h3',
    'i',
    'li',
    'pre',
    'span',
    'table',
    'td',
    'th',
    'to_html',
    'tr',
    'ul',
)
