"""Tabular value records.

Value records describe expected query results and declared procedure
outputs: an ordered header of unique column names and ordered rows
mapping column names to values.
"""

from collections import Counter
from typing import Self

from pydantic import Field, model_validator

from tck_inspection.models import SchemaModel
from tck_inspection.values import CypherValue  # noqa: TC001


class ValueRecords(SchemaModel):
    """Tabular result set.

    Rows are not checked against the header at construction time: a row
    lacking a header column is a malformed fixture that renderers report
    when they reach it.
    """

    header: tuple[str, ...] = Field(
        default=(),
        title='Column names',
        description='Ordered column names. Names must be unique.',
    )

    rows: tuple[dict[str, CypherValue], ...] = Field(
        default=(),
        title='Rows',
        description=(
            'Ordered rows. Each row maps every header column '
            'name to a value.'
        ),
    )

    @model_validator(mode='after')
    def check_unique_header(self) -> Self:
        """Reject headers with duplicated column names.

        Returns:
            The validated records.

        Raises:
            ValueError: If a column name appears more than once.
        """
        duplicates = sorted(
            name
            for name, count in Counter(self.header).items()
            if count > 1
        )
        if duplicates:
            raise ValueError(f'Duplicated columns {", ".join(duplicates)}')

        return self

    @classmethod
    def empty(cls, *header: str) -> Self:
        """Create records without rows.

        Args:
            *header: Column names.

        Returns:
            Value records with the given header and no rows.
        """
        return cls(header=header)
