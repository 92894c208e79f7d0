"""Client for the remote hiring API (activation code, list, create)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from staff_directory.core.config import Settings
from staff_directory.models.employee import (
    RECORD_ID_FIELD,
    CreateEmployeeResult,
    EmployeeDraft,
    EmployeeRecord,
)

logger = logging.getLogger(__name__)

ACTIVATION_CODE_PATH = "get_activation_code"
LIST_EMPLOYEES_PATH = "get_all_employee"
ADD_EMPLOYEE_PATH = "add_employee"


class DirectoryClientError(Exception):
    pass


class FetchError(DirectoryClientError):
    pass


class SubmissionRejected(DirectoryClientError):
    pass


class DirectoryClient:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = 30.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.DIRECTORY_API_BASE_URL:
            logger.warning("Directory API base URL missing, DirectoryClient not initialized")
            return

        self.base_url = settings.DIRECTORY_API_BASE_URL.rstrip("/")
        self.timeout_seconds = settings.DIRECTORY_API_TIMEOUT_SECONDS
        self.initialized = True
        logger.info("DirectoryClient initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    async def _post_json(self, session: aiohttp.ClientSession, path: str, payload: dict[str, Any] | None) -> Any:
        async with session.post(self._url(path), json=payload) as response:
            if response.status != 200:
                error_text = await response.text()
                raise FetchError(f"{path} failed: {response.status} - {error_text[:200]}")
            return await response.json()

    async def _get_activation_code(self, session: aiohttp.ClientSession) -> str:
        data = await self._post_json(session, ACTIVATION_CODE_PATH, None)
        code = data.get("activationCode") if isinstance(data, dict) else None
        if not code:
            raise FetchError("Activation code missing from response")
        return str(code)

    async def _authorized_call(self, path: str, payload: dict[str, Any]) -> Any:
        # Both legs share one session; a failure in either fails the operation.
        if not self.initialized:
            raise FetchError("DirectoryClient not initialized")

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                activation_code = await self._get_activation_code(session)
                return await self._post_json(session, path, {**payload, "activationCode": activation_code})
        except DirectoryClientError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise FetchError(f"{path} request failed: {e}") from e

    async def list_employees(self) -> list[EmployeeRecord]:
        data = await self._authorized_call(LIST_EMPLOYEES_PATH, {})
        if not isinstance(data, list):
            logger.warning("Employee list payload was %s, expected a list", type(data).__name__)
            raise FetchError(f"Unexpected employee list payload: {type(data).__name__}")

        records: list[EmployeeRecord] = []
        for position, item in enumerate(data):
            try:
                records.append(EmployeeRecord.model_validate(item))
            except ValidationError as e:
                record_id = item.get(RECORD_ID_FIELD) if isinstance(item, dict) else None
                logger.warning(
                    "Skipping malformed employee record at %d (%s=%s): %s",
                    position,
                    RECORD_ID_FIELD,
                    record_id,
                    e.errors(include_url=False),
                )
        if len(records) < len(data):
            logger.warning("Skipped %d of %d employee records", len(data) - len(records), len(data))
        return records

    async def create_employee(self, draft: EmployeeDraft) -> CreateEmployeeResult:
        data = await self._authorized_call(ADD_EMPLOYEE_PATH, draft.to_payload())
        confirmation_id = data.get(RECORD_ID_FIELD) if isinstance(data, dict) else None
        if not confirmation_id:
            raise SubmissionRejected("Create response carried no confirmation identifier")
        return CreateEmployeeResult(confirmation_id=str(confirmation_id))

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            timeout = aiohttp.ClientTimeout(total=10)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                await self._get_activation_code(session)
                return True
        except Exception:
            logger.exception("Directory API connection check failed")
            return False


directory_client = DirectoryClient()
