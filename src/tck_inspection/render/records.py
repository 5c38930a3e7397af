"""Value records rendering."""

from typing import TYPE_CHECKING

from tck_inspection.errors import MissingColumnError
from tck_inspection.markup import code, table, td, th, tr
from tck_inspection.values import canonical

if TYPE_CHECKING:
    from tck_inspection.markup import Element
    from tck_inspection.schema import ValueRecords


class RecordsRenderer:
    """Renderer of value records into tables.

    The table has one header row followed by one row per record row.
    Cells are looked up by header column name, so the header decides
    both the order and the completeness of every row.
    """

    def render(self, records: 'ValueRecords') -> 'Element':
        """Render value records as a table.

        Args:
            records: Records to render.

        Returns:
            Table element with a header row and one row per record.

        Raises:
            MissingColumnError: If a row lacks a value for a header column.
        """
        header = tr(*(th(column) for column in records.header))

        rows = []
        for row_num, row in enumerate(records.rows):
            cells = []
            for column in records.header:
                if column not in row:
                    raise MissingColumnError.from_row(
                        column,
                        row,
                        header=records.header,
                        row_num=row_num,
                    )
                cells.append(td(code(canonical(row[column]))))
            rows.append(tr(*cells))

        return table(header, *rows)
