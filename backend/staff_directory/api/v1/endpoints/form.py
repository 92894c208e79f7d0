from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from staff_directory.core.dependencies import get_employee_form
from staff_directory.models.directory import FieldChangeRequest, FormState, SubmissionOutcome
from staff_directory.services.employee_form import (
    EmployeeForm,
    ReadOnlyFieldError,
    SubmissionInProgressError,
    UnknownFieldError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/form", tags=["form"])


@router.get("", response_model=FormState)
async def get_form(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    return form.state()


@router.patch("/fields", response_model=FormState)
async def change_field(
    request: FieldChangeRequest,
    form: EmployeeForm = Depends(get_employee_form),  # noqa: B008
):
    try:
        form.change(request.field, request.value)
    except UnknownFieldError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    except ReadOnlyFieldError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return form.state()


@router.post("/fields/{field}/blur", response_model=FormState)
async def blur_field(
    field: str,
    form: EmployeeForm = Depends(get_employee_form),  # noqa: B008
):
    try:
        form.blur(field)
    except UnknownFieldError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return form.state()


@router.post("/location/retry", response_model=FormState)
async def retry_location(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    await form.retry_location()
    return form.state()


@router.post("/submit", response_model=SubmissionOutcome)
async def submit_form(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    try:
        outcome = await form.submit()
    except SubmissionInProgressError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err

    logger.info("Form submission finished with status=%s", outcome.status)
    return outcome
