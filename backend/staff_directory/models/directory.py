"""Shell, notification and form state models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from staff_directory.models.map import MapView
from staff_directory.models.table import TablePage


class ViewMode(str, Enum):
    TABLE = "table"
    MAP = "map"
    ADD = "add"


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class Notification(BaseModel):
    message: str
    severity: str = Field(default="info", pattern=r"^(success|info|warning|error)$")
    auto_hide_ms: int


class LocationStatus(BaseModel):
    loading: bool = False
    error: str | None = None
    reason: str | None = None


class FormState(BaseModel):
    values: dict[str, str]
    errors: dict[str, str]
    touched: list[str]
    location: LocationStatus
    submitting: bool = False
    submit_enabled: bool = False


class SubmissionOutcome(BaseModel):
    status: str = Field(..., pattern=r"^(created|invalid|failed)$")
    confirmation_id: str | None = None
    form: FormState


class ShellContent(BaseModel):
    kind: str = Field(..., pattern=r"^(loading|empty|table|map|add)$")
    message: str | None = None
    table: TablePage | None = None
    map: MapView | None = None
    form: FormState | None = None


class ShellState(BaseModel):
    view_mode: ViewMode
    load_state: LoadState
    employee_count: int
    location_count: int
    notification: Notification | None = None
    content: ShellContent


class ViewModeRequest(BaseModel):
    mode: ViewMode


class DismissRequest(BaseModel):
    reason: str | None = None


class FieldChangeRequest(BaseModel):
    field: str = Field(..., min_length=1)
    value: str = Field(default="", max_length=200)
