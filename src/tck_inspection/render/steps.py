"""Scenario step rendering.

Every step kind maps to a labelled block. Blocks without content carry
the `emptyStepName` marker on their label, so data-free steps stand out
from steps with tables or query source.
"""

from typing import TYPE_CHECKING, Never, NoReturn

from tck_inspection.errors import UnknownStepError
from tck_inspection.markup import CSS, b, code, div, pre, table, td, tr
from tck_inspection.schema import (
    Execute,
    ExpectError,
    ExpectResult,
    Measure,
    Parameters,
    QueryType,
    RegisterProcedure,
    Setup,
    SideEffect,
    SideEffects,
)
from tck_inspection.settings import get_settings
from tck_inspection.values import canonical

from .records import RecordsRenderer

if TYPE_CHECKING:
    from collections.abc import Mapping

if TYPE_CHECKING:
    from tck_inspection.markup import Element, Markup
    from tck_inspection.schema import Step, ValueRecords
    from tck_inspection.settings import RenderSettings
    from tck_inspection.values import CypherValue


def unsupported(value: Never) -> NoReturn:
    """Fail on a value outside a closed set of kinds.

    Type checkers reject any call whose argument is not narrowed to
    `Never`, which keeps step matching exhaustive.

    Args:
        value: The unmatched value.

    Raises:
        UnknownStepError: Always.
    """
    raise UnknownStepError(value)


class StepRenderer:
    """Renderer of scenario steps into labelled blocks."""

    def __init__(self, settings: 'RenderSettings | None' = None,
                 records: RecordsRenderer | None = None) -> None:
        """Initialize the renderer.

        Args:
            settings: Rendering settings, resolved from the environment
                when omitted.
            records: Renderer of embedded value records.
        """
        self.settings = settings or get_settings()
        self.records = records or RecordsRenderer()

    def render(self, step: 'Step') -> 'Element':
        """Render a single step.

        Args:
            step: Step to render.

        Returns:
            Step block with its label and optional content.

        Raises:
            MissingColumnError: If embedded value records are malformed.
            UnknownStepError: If the step kind is not supported.
        """
        match step:
            case Setup():
                return self.step_block('Setup an empty graph')

            case Parameters(values=values):
                return self.step_block(
                    'Parameters',
                    div(self.parameters_table(values)),
                )

            case RegisterProcedure(signature=signature, values=values):
                return self.step_block(
                    'Registered procedure',
                    div(code(signature)),
                    div(self.records_table(values)),
                )

            case Measure():
                return self.step_block('Measure side effects')

            case Execute(query=query, query_type=query_type):
                return self.step_block(
                    self.query_label(query_type),
                    div(pre(query, style=f'font-family: {self.settings.code_font}')),
                )

            case ExpectResult(expected=expected, sorted=is_sorted):
                order = 'in order' if is_sorted else 'in any order'
                return self.step_block(
                    f'Expect result, {order}',
                    div(self.records_table(expected)),
                )

            case SideEffects(expected=expected):
                return self.step_block(
                    'Check side effects',
                    div(self.side_effects_table(expected)),
                )

            case ExpectError(error_type=error_type, phase=phase, detail=detail):
                return self.step_block(
                    'Expect error',
                    div(table(
                        tr(td(b('Type:')), td(error_type)),
                        tr(td(b('Phase:')), td(phase)),
                        tr(td(b('Detail:')), td(detail)),
                    )),
                )

            case _:
                unsupported(step)

    @staticmethod
    def step_block(name: str, *content: 'Markup') -> 'Element':
        """Build a labelled step block.

        Args:
            name: Step label.
            *content: Content blocks; a block without content gets
                an empty-step label.

        Returns:
            Step block element.
        """
        if not content:
            return div(
                div(name, css=CSS.EMPTY_STEP_NAME),
                css=CSS.STEP,
            )

        return div(
            div(name, css=CSS.STEP_NAME),
            div(*content, css=CSS.STEP_CONTENT),
            css=CSS.STEP,
        )

    @staticmethod
    def query_label(query_type: QueryType) -> str:
        """Label of a query execution step by query role."""
        match query_type:
            case QueryType.INIT:
                return 'Initialize with'
            case QueryType.EXEC:
                return 'Execute query'
            case QueryType.SIDE_EFFECT:
                return 'Execute update'
            case _:
                unsupported(query_type)

    @staticmethod
    def parameters_table(values: 'Mapping[str, CypherValue]') -> 'Element':
        """Table of parameter names and values, in mapping order."""
        return table(*(
            tr(td(name), td(canonical(value)))
            for name, value in values.items()
        ))

    @staticmethod
    def side_effects_table(expected: 'Mapping[SideEffect, int]') -> 'Element':
        """Table of all side effect kinds in their fixed order.

        Kinds missing from the expectation are reported with zero.
        """
        return table(*(
            tr(td(effect.value), td(str(expected.get(effect, 0))))
            for effect in SideEffect
        ))

    def records_table(self, records: 'ValueRecords') -> 'Element':
        """Table of embedded value records."""
        return self.records.render(records)
