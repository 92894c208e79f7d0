"""Table view models: column descriptors, view state and rendered pages."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ColumnDescriptor(BaseModel):
    """A (display header, field key) pair."""

    header: str
    accessor: str


class TableViewState(BaseModel):
    search_term: str = ""
    sort_column: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, ge=1)


class TableRow(BaseModel):
    key: str
    cells: list[str]
    values: dict[str, Any]


class TablePage(BaseModel):
    columns: list[ColumnDescriptor]
    rows: list[TableRow]
    total_count: int
    page_index: int
    page_size: int
    page_size_options: list[int] = []
    search_term: str = ""
    sort_column: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    is_empty: bool
    empty_message: str | None = None


class SearchRequest(BaseModel):
    term: str = Field(default="", max_length=200)


class SortRequest(BaseModel):
    column: str = Field(..., min_length=1)


class PageRequest(BaseModel):
    page_index: int = Field(..., ge=0)


class PageSizeRequest(BaseModel):
    page_size: int = Field(..., ge=1)
