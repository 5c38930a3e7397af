"""Scenario step definitions.

A step is one action or assertion of a scenario. Steps form a closed
set of kinds, expressed as a discriminated union over the `kind` field.
Renderers match exhaustively over this union, so adding a new kind
requires a matching rendering rule.
"""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, NonNegativeInt

from tck_inspection.models import SchemaModel
from tck_inspection.values import CypherValue  # noqa: TC001

from .records import ValueRecords


class QueryType(StrEnum):
    """Role of a query executed by a scenario."""

    #: Setup query building the initial graph.
    INIT = 'init'
    #: The query under test.
    EXEC = 'exec'
    #: Update query run to produce observable side effects.
    SIDE_EFFECT = 'sideEffect'


class SideEffect(StrEnum):
    """Kinds of side effects tracked by a scenario.

    The member order is the fixed order side effects are reported in.
    """

    ADDED_NODES = '+nodes'
    ADDED_RELATIONSHIPS = '+relationships'
    ADDED_LABELS = '+labels'
    ADDED_PROPERTIES = '+properties'
    DELETED_NODES = '-nodes'
    DELETED_RELATIONSHIPS = '-relationships'
    DELETED_LABELS = '-labels'
    DELETED_PROPERTIES = '-properties'


class Setup(SchemaModel):
    """Set up an empty graph."""

    kind: Literal['setup'] = 'setup'


class Parameters(SchemaModel):
    """Provide query parameters."""

    kind: Literal['parameters'] = 'parameters'

    values: dict[str, CypherValue] = Field(
        default_factory=dict,
        title='Parameter values',
        description='Mapping of parameter names to their values.',
    )


class RegisterProcedure(SchemaModel):
    """Register a procedure with its declared output rows."""

    kind: Literal['registerProcedure'] = 'registerProcedure'

    signature: str = Field(
        title='Procedure signature',
        description='Signature of the procedure, for example `test.proc(in :: INTEGER?) :: (out :: STRING?)`.',
    )

    values: ValueRecords = Field(
        default_factory=ValueRecords,
        title='Procedure output',
        description='Rows the procedure produces for given inputs.',
    )


class Measure(SchemaModel):
    """Start tracking side effects after this point."""

    kind: Literal['measure'] = 'measure'


class Execute(SchemaModel):
    """Execute a query."""

    kind: Literal['execute'] = 'execute'

    query: str = Field(
        title='Query text',
        description='Query source, rendered verbatim.',
    )

    query_type: QueryType = Field(
        default=QueryType.EXEC,
        title='Query role',
        description='Whether the query sets up the graph, is under test, or updates the graph.',
    )


class ExpectResult(SchemaModel):
    """Expect a query result."""

    kind: Literal['expectResult'] = 'expectResult'

    expected: ValueRecords = Field(
        default_factory=ValueRecords,
        title='Expected result',
        description='Rows the query under test must return.',
    )

    sorted: bool = Field(
        default=False,
        title='Ordered result',
        description='Whether the row order is part of the expectation.',
    )


class SideEffects(SchemaModel):
    """Expect side effect counts."""

    kind: Literal['sideEffects'] = 'sideEffects'

    expected: dict[SideEffect, NonNegativeInt] = Field(
        default_factory=dict,
        title='Expected side effects',
        description='Counts per side effect kind. Missing kinds count as zero.',
    )


class ExpectError(SchemaModel):
    """Expect the query to fail."""

    kind: Literal['expectError'] = 'expectError'

    error_type: str = Field(
        title='Error type',
        description='Expected error type, for example `SyntaxError`.',
    )

    phase: str = Field(
        title='Error phase',
        description='Phase the error is raised in, for example `compile time`.',
    )

    detail: str = Field(
        title='Error detail',
        description='Expected error detail code.',
    )


#: A scenario step, discriminated by its `kind` tag.
Step = Annotated[
    Setup
    | Parameters
    | RegisterProcedure
    | Measure
    | Execute
    | ExpectResult
    | SideEffects
    | ExpectError,
    Field(discriminator='kind'),
]
