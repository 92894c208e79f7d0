"""Add-employee form: draft values, touched fields, location and submission."""

from __future__ import annotations

import logging
from collections.abc import Callable

from staff_directory.models.directory import FormState, LocationStatus, SubmissionOutcome
from staff_directory.models.employee import (
    COORDINATE_FIELDS,
    DRAFT_FIELDS,
    RECORD_ID_FIELD,
    EmployeeDraft,
    EmployeeRecord,
)
from staff_directory.services.directory_client import DirectoryClient, DirectoryClientError
from staff_directory.services.form_validator import validate_draft
from staff_directory.services.location_service import LocationError, LocationService
from staff_directory.services.notifications import NotificationCenter

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Employee added successfully!"
FAILED_SUBMIT_MESSAGE = "Failed to submit form. Please try again."
INVALID_SUBMIT_MESSAGE = "Please fix all errors before submitting"


class FormError(Exception):
    pass


class UnknownFieldError(FormError):
    pass


class ReadOnlyFieldError(FormError):
    pass


class SubmissionInProgressError(FormError):
    pass


class EmployeeForm:
    def __init__(
        self,
        client: DirectoryClient,
        locator: LocationService,
        notifications: NotificationCenter,
        on_created: Callable[[EmployeeRecord], None] | None = None,
    ) -> None:
        self._client = client
        self._locator = locator
        self._notifications = notifications
        self._on_created = on_created

        self.values: dict[str, str] = {name: "" for name in DRAFT_FIELDS}
        self.touched: set[str] = set()
        self.errors: dict[str, str] = {}
        self.location_error: LocationError | None = None
        self.location_loading = False
        self.submitting = False
        self.mounted = False
        self._revalidate()

    def _revalidate(self) -> None:
        self.errors = validate_draft(self.values)

    def _check_field(self, name: str) -> None:
        if name not in self.values:
            raise UnknownFieldError(f"Unknown field: {name}")

    @property
    def submit_enabled(self) -> bool:
        return not self.errors and self.location_error is None

    @property
    def visible_errors(self) -> dict[str, str]:
        return {name: msg for name, msg in self.errors.items() if name in self.touched}

    async def mount(self) -> None:
        if self.mounted:
            return
        self.mounted = True
        await self.acquire_location()

    async def acquire_location(self) -> None:
        if self.location_loading:
            return

        self.location_loading = True
        try:
            latitude, longitude = await self._locator.get_current_position()
        except LocationError as e:
            logger.error("Error getting location (%s): %s", e.reason.value, e)
            self.location_error = e
        else:
            self.values["latitude"] = f"{latitude:.6f}"
            self.values["longitude"] = f"{longitude:.6f}"
            self.location_error = None
        finally:
            self.location_loading = False
            self._revalidate()

    async def retry_location(self) -> None:
        await self.acquire_location()

    def change(self, name: str, value: str) -> None:
        self._check_field(name)
        if name in COORDINATE_FIELDS:
            raise ReadOnlyFieldError(f"{name} is set from the current location and cannot be edited")
        self.values[name] = value
        self._revalidate()

    def blur(self, name: str) -> None:
        self._check_field(name)
        self.touched.add(name)

    def _reset_after_create(self) -> None:
        for name in DRAFT_FIELDS:
            if name not in COORDINATE_FIELDS:
                self.values[name] = ""
        self._revalidate()

    def state(self) -> FormState:
        return FormState(
            values=dict(self.values),
            errors=self.visible_errors,
            touched=sorted(self.touched),
            location=LocationStatus(
                loading=self.location_loading,
                error=self.location_error.message if self.location_error else None,
                reason=self.location_error.reason.value if self.location_error else None,
            ),
            submitting=self.submitting,
            submit_enabled=self.submit_enabled,
        )

    async def submit(self) -> SubmissionOutcome:
        if self.submitting:
            raise SubmissionInProgressError("A submission is already in flight")

        self.touched = set(DRAFT_FIELDS)
        self._revalidate()
        if not self.submit_enabled:
            self._notifications.error(INVALID_SUBMIT_MESSAGE)
            return SubmissionOutcome(status="invalid", form=self.state())

        draft = EmployeeDraft.from_values(self.values)
        self.submitting = True
        try:
            result = await self._client.create_employee(draft)
        except DirectoryClientError:
            logger.exception("Submission error")
            result = None
        finally:
            self.submitting = False

        if result is None:
            self._notifications.error(FAILED_SUBMIT_MESSAGE)
            return SubmissionOutcome(status="failed", form=self.state())

        logger.info("Employee created (confirmation_id=%s)", result.confirmation_id)
        if self._on_created is not None:
            record = EmployeeRecord.model_validate({**draft.to_payload(), RECORD_ID_FIELD: result.confirmation_id})
            self._on_created(record)

        self._reset_after_create()
        self._notifications.success(CREATED_MESSAGE)
        return SubmissionOutcome(status="created", confirmation_id=result.confirmation_id, form=self.state())
