"""Search, sort and paginate pipeline behind the employee table.

Rows are plain mappings; the pipeline only knows about them through the
column descriptors it is given.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import cmp_to_key
from typing import Any

from staff_directory.models.table import (
    ColumnDescriptor,
    SortDirection,
    TablePage,
    TableRow,
    TableViewState,
)

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

NULL_CELL = "-"
NO_DATA_MESSAGE = "No Data Found"

DEFAULT_COLUMNS: list[ColumnDescriptor] = [
    ColumnDescriptor(header="First Name", accessor="firstName"),
    ColumnDescriptor(header="Last Name", accessor="lastName"),
    ColumnDescriptor(header="Email", accessor="email"),
    ColumnDescriptor(header="Phone Number", accessor="phoneNumber"),
    ColumnDescriptor(header="Employee ID", accessor="employeeID"),
    ColumnDescriptor(header="City", accessor="city"),
    ColumnDescriptor(header="Country", accessor="country"),
    ColumnDescriptor(header="Latitude", accessor="latitude"),
    ColumnDescriptor(header="Longitude", accessor="longitude"),
]


class TableStateError(Exception):
    pass


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def row_matches(row: Row, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.casefold()
    return any(needle in str(value).casefold() for value in row.values() if value is not None)


def filter_rows(rows: Sequence[Row], search_term: str) -> list[Row]:
    return [row for row in rows if row_matches(row, search_term)]


def compare_values(a: Any, b: Any) -> int:
    # None sorts before any value.
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    left, right = str(a), str(b)
    return (left > right) - (left < right)


def sort_rows(rows: Sequence[Row], column: str | None, direction: SortDirection) -> list[Row]:
    if not column:
        return list(rows)

    sign = -1 if direction == SortDirection.DESC else 1

    def _compare(x: tuple[int, Row], y: tuple[int, Row]) -> int:
        order = sign * compare_values(x[1].get(column), y[1].get(column))
        if order:
            return order
        return x[0] - y[0]

    indexed = sorted(enumerate(rows), key=cmp_to_key(_compare))
    return [row for _, row in indexed]


def effective_page_index(total: int, page_index: int, page_size: int) -> int:
    if page_index * page_size >= total:
        return 0
    return page_index


def paginate(rows: Sequence[Row], page_index: int, page_size: int) -> tuple[list[Row], int]:
    page_index = effective_page_index(len(rows), page_index, page_size)
    start = page_index * page_size
    return list(rows[start : start + page_size]), page_index


def render_cell(value: Any) -> str:
    if value is None:
        return NULL_CELL
    return str(value)


def _empty_message(rows: Sequence[Row], is_empty: bool, search_term: str) -> str | None:
    # Nothing loaded is reported apart from a search that matched nothing.
    if not rows:
        return NO_DATA_MESSAGE
    if is_empty and search_term:
        return f'No results found for "{search_term}"'
    return None


def build_table_page(
    rows: Sequence[Row],
    columns: Sequence[ColumnDescriptor],
    state: TableViewState,
    *,
    key_field: str | None = None,
    page_size_options: Sequence[int] = (),
) -> TablePage:
    filtered = filter_rows(rows, state.search_term)
    ordered = sort_rows(filtered, state.sort_column, state.sort_direction)
    page_rows, page_index = paginate(ordered, state.page_index, state.page_size)

    offset = page_index * state.page_size
    table_rows: list[TableRow] = []
    for position, row in enumerate(page_rows, start=offset):
        key = row.get(key_field) if key_field else None
        table_rows.append(
            TableRow(
                key=str(key) if key is not None else f"row-{position}",
                cells=[render_cell(row.get(c.accessor)) for c in columns],
                values=dict(row),
            )
        )

    is_empty = not filtered
    return TablePage(
        columns=list(columns),
        rows=table_rows,
        total_count=len(filtered),
        page_index=page_index,
        page_size=state.page_size,
        page_size_options=list(page_size_options),
        search_term=state.search_term,
        sort_column=state.sort_column,
        sort_direction=state.sort_direction,
        is_empty=is_empty,
        empty_message=_empty_message(rows, is_empty, state.search_term),
    )


class TableController:
    """Owns the table view state and the transitions the table controls allow."""

    def __init__(
        self,
        columns: Sequence[ColumnDescriptor] | None = None,
        *,
        page_size: int = 10,
        page_size_options: Sequence[int] = (10, 25, 50),
        key_field: str | None = None,
    ) -> None:
        self.columns: list[ColumnDescriptor] = list(columns or DEFAULT_COLUMNS)
        self.page_size_options: list[int] = list(page_size_options)
        self.key_field = key_field
        self.state = TableViewState(page_size=page_size)

    def set_search(self, term: str) -> None:
        self.state.search_term = term
        self.state.page_index = 0

    def request_sort(self, column: str) -> None:
        if column not in {c.accessor for c in self.columns}:
            raise TableStateError(f"Unknown column: {column}")

        is_asc = self.state.sort_column == column and self.state.sort_direction == SortDirection.ASC
        self.state.sort_direction = SortDirection.DESC if is_asc else SortDirection.ASC
        self.state.sort_column = column

    def set_page(self, page_index: int) -> None:
        if page_index < 0:
            raise TableStateError(f"Invalid page index: {page_index}")
        self.state.page_index = page_index

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1 or (self.page_size_options and page_size not in self.page_size_options):
            raise TableStateError(
                f"Unsupported page size: {page_size}. Allowed: {', '.join(map(str, self.page_size_options))}"
            )
        self.state.page_size = page_size
        self.state.page_index = 0

    def render(self, rows: Sequence[Row]) -> TablePage:
        page = build_table_page(
            rows,
            self.columns,
            self.state,
            key_field=self.key_field,
            page_size_options=self.page_size_options,
        )
        if page.page_index != self.state.page_index:
            logger.debug("Page %d out of range, resetting to 0", self.state.page_index)
            self.state.page_index = page.page_index
        return page
