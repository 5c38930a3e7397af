"""Cypher value types and their canonical string form.

This module defines the value type system carried by scenario steps:
parameters, expected result rows and procedure outputs. Renderers never
inspect values structurally; they only consume the canonical string
form produced by `canonical`, which follows Cypher literal syntax.

Graph entities carry an `entity` tag, so a document can tell a node
apart from a plain map with the same keys.
"""

import re
from collections.abc import Mapping, Sequence
from math import isinf, isnan
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Discriminator, Field, Tag

from tck_inspection.models import SchemaModel

#: Scalars are atomic values rendered as Cypher literals.
type Scalar = bool | int | float | str

#: A value as it appears in test scenarios, dispatched by `value_kind`.
type CypherValue = Annotated[
    Annotated[None, Tag('null')]
    | Annotated[Scalar, Tag('scalar')]
    | Annotated[Sequence['CypherValue'], Tag('list')]
    | Annotated[Mapping[str, 'CypherValue'], Tag('map')]
    | Annotated[Node, Tag('node')]
    | Annotated[Relationship, Tag('relationship')]
    | Annotated[Path, Tag('path')],
    Discriminator(value_kind),
]

SCALARS = (bool, int, float, str)
MAPPINGS = (Mapping,)
SEQUENCES = (list, tuple)

ENTITY_KEY = 'entity'
ENTITY_KINDS = frozenset({'node', 'relationship', 'path'})

NULL = 'null'

IDENTIFIER = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def value_kind(value: Any) -> str | None:  # noqa: ANN401
    """Resolve the kind of a raw or validated value.

    Mappings tagged with a known `entity` kind are graph entities;
    all other mappings are plain maps.

    Args:
        value: Value to classify.

    Returns:
        Kind tag of the value, or `None` if the value is unsupported.
    """
    if value is None:
        return 'null'

    if isinstance(value, SCALARS):
        return 'scalar'

    if isinstance(value, (Node, Relationship, Path)):
        return value.entity

    if isinstance(value, MAPPINGS):
        kind = value.get(ENTITY_KEY)
        return kind if kind in ENTITY_KINDS else 'map'

    if isinstance(value, SEQUENCES):
        return 'list'

    return None


def _require_entity(schema: dict[str, Any]) -> None:
    """Mark the entity tag as required in a JSON Schema."""
    required = schema.setdefault('required', [])
    if ENTITY_KEY not in required:
        required.insert(0, ENTITY_KEY)


def _format_float(value: float) -> str:
    """Format a float as a Cypher literal.

    Args:
        value: Float value.

    Returns:
        Literal text, always with a decimal point in the mantissa
        for finite values, for example `0.5` or `1.0E20`.
    """
    if isnan(value):
        return 'NaN'

    if isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'

    mantissa, _, exponent = repr(value).partition('e')
    if '.' not in mantissa:
        mantissa += '.0'

    if not exponent:
        return mantissa

    return f'{mantissa}E{int(exponent)}'


def _format_string(value: str) -> str:
    """Quote a string as a Cypher literal."""
    escaped = value.replace('\\', '\\\\').replace("'", "\\'")

    return f"'{escaped}'"


def _format_name(name: str) -> str:
    """Format a key, label or type name, backtick-quoted unless an identifier."""
    if IDENTIFIER.fullmatch(name):
        return name

    escaped = name.replace('`', '``')

    return f'`{escaped}`'


def _format_properties(properties: 'Mapping[str, CypherValue]') -> str:
    """Format a property map, prefixed with a space when not empty."""
    if not properties:
        return ''

    return f' {canonical(properties)}'


def canonical(value: 'CypherValue') -> str:
    """Convert a value into its canonical string form.

    Args:
        value: Value to format.

    Returns:
        Cypher literal text of the value.

    Raises:
        TypeError: If the value type is unsupported.
    """
    if value is None:
        return NULL

    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        return _format_float(value)

    if isinstance(value, str):
        return _format_string(value)

    if isinstance(value, (Node, Relationship, Path)):
        return str(value)

    if isinstance(value, MAPPINGS):
        items = ', '.join(
            f'{_format_name(key)}: {canonical(item)}'
            for key, item in value.items()
        )
        return f'{{{items}}}'

    if isinstance(value, SEQUENCES):
        items = ', '.join(canonical(item) for item in value)
        return f'[{items}]'

    raise TypeError(f'{value!r} has unsupported type')


class Node(SchemaModel):
    """Graph node value.

    Rendered as `(:Label1:Label2 {key: value})`.
    """

    model_config = ConfigDict(json_schema_extra=_require_entity)

    entity: Literal['node'] = Field(
        default='node',
        title='Entity kind',
        description='Tag telling a node apart from a plain map.',
    )

    labels: tuple[str, ...] = Field(
        default=(),
        title='Node labels',
        description='Labels attached to the node, in declaration order.',
    )

    properties: dict[str, CypherValue] = Field(
        default_factory=dict,
        title='Node properties',
        description='Property map of the node.',
    )

    def __str__(self) -> str:
        """Cypher literal representation."""
        labels = ''.join(f':{_format_name(label)}' for label in self.labels)

        return f'({labels}{_format_properties(self.properties)})'


class Relationship(SchemaModel):
    """Graph relationship value.

    Rendered as `[:TYPE {key: value}]`.
    """

    model_config = ConfigDict(json_schema_extra=_require_entity)

    entity: Literal['relationship'] = Field(
        default='relationship',
        title='Entity kind',
        description='Tag telling a relationship apart from a plain map.',
    )

    type: str = Field(
        title='Relationship type',
        description='Type name of the relationship.',
    )

    properties: dict[str, CypherValue] = Field(
        default_factory=dict,
        title='Relationship properties',
        description='Property map of the relationship.',
    )

    def __str__(self) -> str:
        """Cypher literal representation."""
        return f'[:{_format_name(self.type)}{_format_properties(self.properties)}]'


class PathStep(SchemaModel):
    """A single hop of a path: a relationship and the node it leads to."""

    relationship: Relationship
    node: Node

    direction: Literal['forward', 'backward'] = Field(
        default='forward',
        title='Traversal direction',
        description=(
            'Whether the relationship points from the previous node '
            'to this node (`forward`) or the other way round (`backward`).'
        ),
    )

    def __str__(self) -> str:
        """Cypher literal representation of the hop."""
        if self.direction == 'forward':
            return f'-{self.relationship}->{self.node}'

        return f'<-{self.relationship}-{self.node}'


class Path(SchemaModel):
    """Graph path value.

    Rendered as `<(start)-[:T]->(next)...>`.
    """

    model_config = ConfigDict(json_schema_extra=_require_entity)

    entity: Literal['path'] = Field(
        default='path',
        title='Entity kind',
        description='Tag telling a path apart from a plain map.',
    )

    start: Node = Field(
        title='Start node',
        description='The node the path starts with.',
    )

    steps: tuple[PathStep, ...] = Field(
        default=(),
        title='Path hops',
        description='Ordered hops following the start node.',
    )

    def __str__(self) -> str:
        """Cypher literal representation."""
        hops = ''.join(str(step) for step in self.steps)

        return f'<{self.start}{hops}>'


Node.model_rebuild()
Relationship.model_rebuild()
PathStep.model_rebuild()
Path.model_rebuild()
