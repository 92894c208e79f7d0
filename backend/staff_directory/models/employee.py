"""Employee models for the remote hiring API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Wire name of the server-assigned identifier, also the create success marker.
RECORD_ID_FIELD = "Hiring_TestID"

DRAFT_FIELDS: tuple[str, ...] = (
    "firstName",
    "lastName",
    "email",
    "phoneNumber",
    "employeeID",
    "city",
    "country",
    "latitude",
    "longitude",
)

COORDINATE_FIELDS: tuple[str, ...] = ("latitude", "longitude")


def _coerce_text(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


class EmployeeRecord(BaseModel):
    """One employee as returned by the list endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = Field(default=None, alias=RECORD_ID_FIELD)
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")
    employee_id: str | None = Field(default=None, alias="employeeID")
    city: str | None = None
    country: str | None = None
    # Coordinates are kept as delivered; unplottable values only keep the
    # record off the map.
    latitude: Any = None
    longitude: Any = None

    @field_validator(
        "id",
        "first_name",
        "last_name",
        "email",
        "phone_number",
        "employee_id",
        "city",
        "country",
        "latitude",
        "longitude",
        mode="before",
    )
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        return _coerce_text(value)

    def to_row(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class EmployeeDraft(BaseModel):
    """Add-employee form fields as posted to the create endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    phone_number: str = Field(default="", alias="phoneNumber")
    employee_id: str = Field(default="", alias="employeeID")
    city: str = ""
    country: str = ""
    latitude: str = ""
    longitude: str = ""

    @classmethod
    def from_values(cls, values: dict[str, str]) -> EmployeeDraft:
        return cls.model_validate({name: values.get(name, "") for name in DRAFT_FIELDS})

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class CreateEmployeeResult(BaseModel):
    confirmation_id: str
