"""HTML serialization of the markup tree."""

from html import escape
from typing import TYPE_CHECKING

from .nodes import Element

if TYPE_CHECKING:
    from .nodes import Markup


def _attributes(element: Element) -> str:
    """Serialize element style markers and attributes.

    Style markers become the `class` attribute, preceding all other
    attributes. Attribute values are always quoted and escaped.

    Args:
        element: Element to serialize attributes of.

    Returns:
        Attribute text with a leading space, or an empty string.
    """
    attrs = {}
    if element.css:
        attrs['class'] = ' '.join(element.css)
    attrs.update(element.attrs)

    return ''.join(
        f' {name}="{escape(value, quote=True)}"'
        for name, value in attrs.items()
    )


def to_html(markup: 'Markup') -> str:
    """Serialize a markup tree to HTML.

    Text leaves are escaped. Fragments and pages contribute only their
    children; no document head or body is added.

    Args:
        markup: Node or text leaf to serialize.

    Returns:
        HTML text.
    """
    if isinstance(markup, str):
        return escape(markup, quote=False)

    content = ''.join(to_html(child) for child in markup.children)

    if not isinstance(markup, Element):
        return content

    return f'<{markup.tag}{_attributes(markup)}>{content}</{markup.tag}>'
