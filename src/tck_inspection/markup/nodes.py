"""Markup tree nodes and tag builders.

Nodes are immutable models. An `Element` has a tag, style markers,
attributes and children; a `Fragment` is a tag-less sequence of
children. Text leaves are plain strings and are escaped only when the
tree is serialized.
"""

from collections.abc import Sequence
from functools import partial
from typing import Self

from pydantic import Field

from tck_inspection.models import SchemaModel

from .styles import CSS

#: A child of a node: either another node or a text leaf.
type Markup = Node | str


class Node(SchemaModel):
    """Base class of markup tree nodes."""

    children: tuple[Markup, ...] = Field(
        default=(),
        title='Child nodes',
        description='Ordered child nodes and text leaves.',
    )

    @property
    def text(self) -> str:
        """Concatenated text of all leaves, in document order."""
        return ''.join(
            child if isinstance(child, str) else child.text
            for child in self.children
        )

    def find_all(self, tag: str) -> tuple['Element', ...]:
        """Collect all descendant elements with the given tag.

        Args:
            tag: Tag name to look for.

        Returns:
            Matching elements, in document order.
        """
        found: list[Element] = []
        for child in self.children:
            if isinstance(child, str):
                continue
            if isinstance(child, Element) and child.tag == tag:
                found.append(child)
            found.extend(child.find_all(tag))

        return tuple(found)


class Element(Node):
    """Tagged markup node."""

    tag: str = Field(
        title='Tag name',
        description='Kind of the node, serialized as the HTML tag name.',
    )

    css: tuple[CSS, ...] = Field(
        default=(),
        title='Style markers',
        description='Opaque identifiers for stylesheet lookup.',
    )

    attrs: dict[str, str] = Field(
        default_factory=dict,
        title='Attributes',
        description='Additional attributes such as link targets and style hints.',
    )


class Fragment(Node):
    """Tag-less sequence of markup nodes."""


class Page(Fragment):
    """Page content: a title followed by its body nodes."""

    @property
    def title(self) -> Element:
        """Page title element."""
        title = self.children[0]
        if not isinstance(title, Element):
            raise TypeError(f'{title!r} is not a page title')

        return title

    @property
    def body(self) -> tuple[Markup, ...]:
        """Nodes following the page title."""
        return self.children[1:]

    @classmethod
    def of(cls, title: Element, *body: Markup) -> Self:
        """Create a page from its title and body nodes."""
        return cls(children=(title, *body))


def element(tag: str, *children: Markup | None,
            css: CSS | Sequence[CSS] = (),
            **attrs: str) -> Element:
    """Build an element.

    Args:
        tag: Tag name.
        *children: Child nodes and text leaves; `None` children are skipped.
        css: A style marker or a sequence of style markers.
        **attrs: Additional attributes.

    Returns:
        The built element.
    """
    if isinstance(css, CSS):
        css = (css,)

    return Element(
        tag=tag,
        css=tuple(css),
        attrs=attrs,
        children=tuple(child for child in children if child is not None),
    )


def frag(*children: Markup | None) -> Fragment:
    """Build a fragment, skipping `None` children."""
    return Fragment(children=tuple(child for child in children if child is not None))


a = partial(element, 'a')
b = partial(element, 'b')
code = partial(element, 'code')
div = partial(element, 'div')
h1 = partial(element, 'h1')
h2 = partial(element, 'h2')
h3 = partial(element, 'h3')
i = partial(element, 'i')
li = partial(element, 'li')
pre = partial(element, 'pre')
span = partial(element, 'span')
table = partial(element, 'table')
td = partial(element, 'td')
th = partial(element, 'th')
tr = partial(element, 'tr')
ul = partial(element, 'ul')


Node.model_rebuild()
Element.model_rebuild()
Fragment.model_rebuild()
Page.model_rebuild()
