"""Core exception hierarchy.

This module defines the error types raised while rendering scenarios.
Rendering fails only structurally: a value record row without a value
for one of its header columns, or a step outside the closed set of
known step kinds. Both signal a malformed fixture or a programming
error and are never retried.
"""

from os import linesep
from typing import TYPE_CHECKING, Any, TypedDict

from yaml import dump

from tck_inspection.values import MAPPINGS, SCALARS, SEQUENCES, canonical

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from typing import Self

if TYPE_CHECKING:
    from tck_inspection.values import CypherValue

SNIPPET_ELLIPSIS = f' ...{linesep}'
SNIPPET_INDENT = 2

FORMAT_INDENT = 4


class ErrorContext(TypedDict, total=False):
    """Container describing contextual information for error formatting.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Title of the scenario being rendered.
    scenario: str | None

    #: Position of the step within its scenario.
    step_num: int | None
    #: Position of the row within its value records.
    row_num: int | None

    #: Data associated with the error, dumped as a YAML snippet.
    element: Any


class ErrorFormatter:
    """Formatter of rendering error messages.

    A formatted message is the base message followed by location lines
    and a YAML dump of the offending data.
    """

    @classmethod
    def format(cls, message: str, context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            context: Optional error context with location and data.

        Returns:
            The message, extended with location and snippet when known.
        """
        if not context:
            return message

        indent = ' ' * FORMAT_INDENT

        return ''.join((
            message,
            linesep,
            cls.get_location_string(context, indent),
            cls.get_snippet_string(context, indent * 2),
        ))

    @staticmethod
    def get_location_string(context: ErrorContext, indent: str = '') -> str:
        """One line per known location part, with one-based positions."""
        lines = []
        if scenario := context.get('scenario'):
            lines.append(f'in scenario "{scenario}"')

        if (step_num := context.get('step_num')) is not None:
            lines.append(f'on step {step_num + 1}')

        if (row_num := context.get('row_num')) is not None:
            lines.append(f'on row {row_num + 1}')

        return ''.join(f'{indent}{line}{linesep}' for line in lines)

    @classmethod
    def get_snippet_string(cls, context: ErrorContext, indent: str = '') -> str:
        """YAML dump of the offending data, or nothing without data."""
        element = context.get('element')
        if not element:
            return ''

        data = dump(
            cls._filter_unsafe(element),
            indent=SNIPPET_INDENT,
            sort_keys=False,
            allow_unicode=True,
        )

        lines = [f'{indent}{SNIPPET_ELLIPSIS}']
        lines.extend(f'{indent}{line}{linesep}' for line in data.splitlines() if line.strip())

        return ''.join(lines)

    @classmethod
    def _filter_unsafe(cls, value: Any) -> Any:  # noqa: ANN401
        """Replace graph entities with their canonical string form."""
        if value is None or isinstance(value, SCALARS):
            return value

        if isinstance(value, MAPPINGS):
            return {
                key: cls._filter_unsafe(item)
                for key, item in value.items()
            }

        if isinstance(value, SEQUENCES):
            return [cls._filter_unsafe(item) for item in value]

        return canonical(value)


class InspectionError(Exception, ErrorFormatter):
    """Base exception for all tck-inspection errors.

    All custom exceptions raised by the library inherit from this class
    to allow unified error handling by callers.
    """

    def __init__(self, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            context: Error context with location and offending data.
        """
        self.message = message
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String representation."""
        return self.format(self.message, self.context)


class MissingColumnError(InspectionError):
    """Error raised when a record row lacks a value for a header column.

    Rows are rendered by looking up each header column, so a missing
    value is never replaced with a blank cell.
    """

    def __init__(self, column: str, *,
                 header: 'Sequence[str]' = (),
                 row_num: int | None = None,
                 context: ErrorContext | None = None) -> None:
        """Initialize a missing column error.

        Args:
            column: Name of the missing column.
            header: Header of the rendered value records.
            row_num: Position of the offending row.
            context: Error context with location and offending data.
        """
        self.column = column
        self.header = tuple(header)
        self.row_num = row_num

        super().__init__(f'Missing value for column {column!r}', context=context)

    @classmethod
    def from_row(cls, column: str, row: 'Mapping[str, CypherValue]', *,
                 header: 'Sequence[str]',
                 row_num: int) -> 'Self':
        """Create an error describing an offending record row.

        Args:
            column: Name of the missing column.
            row: Row lacking the column.
            header: Header of the rendered value records.
            row_num: Position of the row.

        Returns:
            An initialized MissingColumnError with row context.
        """
        error_context = ErrorContext(
            row_num=row_num,
            element={
                'header': list(header),
                'row': dict(row),
            },
        )

        return cls(column, header=header, row_num=row_num, context=error_context)

    def in_step(self, step_num: int, scenario: str | None = None) -> 'Self':
        """Create a copy of the error located within a scenario step.

        Args:
            step_num: Position of the step that embeds the records.
            scenario: Title of the scenario being rendered.

        Returns:
            A new MissingColumnError with the extended context.
        """
        error_context = ErrorContext({
            **(self.context or {}),
            'step_num': step_num,
            'scenario': scenario,
        })

        return type(self)(
            self.column,
            header=self.header,
            row_num=self.row_num,
            context=error_context,
        )


class UnknownStepError(InspectionError):
    """Error raised for a step or query type outside the known set.

    Renderers match exhaustively over all known step kinds; reaching
    this error means a new kind was added without a rendering rule.
    """

    def __init__(self, value: object) -> None:
        """Initialize an unknown step error.

        Args:
            value: The unsupported step or tag value.
        """
        self.value = value

        super().__init__(f'Unsupported step element {value!r}')
