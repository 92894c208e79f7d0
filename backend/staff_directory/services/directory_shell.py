"""Top-level directory state: load lifecycle, view selection and lazily mounted views."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from staff_directory.core.config import Settings, settings
from staff_directory.models.directory import LoadState, ShellContent, ShellState, ViewMode
from staff_directory.models.employee import RECORD_ID_FIELD, EmployeeRecord
from staff_directory.models.map import MapPoint, MapView
from staff_directory.models.table import TablePage
from staff_directory.services.directory_client import DirectoryClient, DirectoryClientError, directory_client
from staff_directory.services.employee_form import EmployeeForm
from staff_directory.services.geolocation import filter_locations
from staff_directory.services.location_service import LocationService, location_service
from staff_directory.services.map_view import build_map_view
from staff_directory.services.notifications import NotificationCenter
from staff_directory.services.table_pipeline import NO_DATA_MESSAGE, TableController

logger = logging.getLogger(__name__)

LOAD_SUCCESS_MESSAGE = "Data loaded successfully!"
LOAD_FAILURE_MESSAGE = "Failed to fetch employees"


@dataclass(frozen=True)
class DirectorySnapshot:
    """Employees and their map points, always published together."""

    employees: tuple[EmployeeRecord, ...] = ()
    locations: tuple[MapPoint, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[EmployeeRecord]) -> DirectorySnapshot:
        employees = tuple(records)
        return cls(employees=employees, locations=tuple(filter_locations(employees)))


class DirectoryShell:
    def __init__(
        self,
        client: DirectoryClient,
        locator: LocationService,
        config: Settings,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self._client = client
        self._locator = locator
        self._settings = config
        self.notifications = notifications or NotificationCenter(
            config.NOTIFICATION_AUTO_HIDE_MS,
            history_size=config.NOTIFICATION_HISTORY_SIZE,
        )
        self.view_mode = ViewMode.TABLE
        self.load_state = LoadState.IDLE
        self.snapshot = DirectorySnapshot()
        self._fetch_started = False
        self._table: TableController | None = None
        self._form: EmployeeForm | None = None

    @property
    def fetch_started(self) -> bool:
        return self._fetch_started

    async def mount(self) -> None:
        # The latch is set before the first await so a second mount signal
        # arriving while the fetch is in flight is ignored.
        if self._fetch_started:
            return
        self._fetch_started = True
        self.load_state = LoadState.LOADING

        try:
            records = await self._client.list_employees()
        except DirectoryClientError:
            logger.exception("Error fetching employees")
            self.snapshot = DirectorySnapshot()
            self.load_state = LoadState.ERRORED
            self.notifications.error(LOAD_FAILURE_MESSAGE)
            return

        self.snapshot = DirectorySnapshot.from_records(records)
        self.load_state = LoadState.LOADED
        logger.info(
            "Loaded %d employees (%d with valid locations)",
            len(self.snapshot.employees),
            len(self.snapshot.locations),
        )
        self.notifications.success(LOAD_SUCCESS_MESSAGE)

    def select_view(self, mode: ViewMode) -> None:
        self.view_mode = mode

    @property
    def table(self) -> TableController:
        if self._table is None:
            self._table = TableController(
                page_size=self._settings.TABLE_DEFAULT_PAGE_SIZE,
                page_size_options=self._settings.TABLE_PAGE_SIZE_OPTIONS,
                key_field=RECORD_ID_FIELD,
            )
        return self._table

    @property
    def form(self) -> EmployeeForm:
        if self._form is None:
            self._form = EmployeeForm(
                self._client,
                self._locator,
                self.notifications,
                on_created=self._publish_created,
            )
        return self._form

    async def mount_form(self) -> EmployeeForm:
        form = self.form
        await form.mount()
        return form

    def _publish_created(self, record: EmployeeRecord) -> None:
        self.snapshot = DirectorySnapshot.from_records((*self.snapshot.employees, record))

    def table_page(self) -> TablePage:
        return self.table.render([record.to_row() for record in self.snapshot.employees])

    def map_view(self) -> MapView:
        return build_map_view(self.snapshot.locations, self._settings)

    async def render(self) -> ShellState:
        if self.load_state in (LoadState.IDLE, LoadState.LOADING):
            content = ShellContent(kind="loading")
        elif not self.snapshot.employees:
            content = ShellContent(kind="empty", message=NO_DATA_MESSAGE)
        elif self.view_mode == ViewMode.TABLE:
            content = ShellContent(kind="table", table=self.table_page())
        elif self.view_mode == ViewMode.MAP:
            content = ShellContent(kind="map", map=self.map_view())
        else:
            form = await self.mount_form()
            content = ShellContent(kind="add", form=form.state())

        return ShellState(
            view_mode=self.view_mode,
            load_state=self.load_state,
            employee_count=len(self.snapshot.employees),
            location_count=len(self.snapshot.locations),
            notification=self.notifications.current,
            content=content,
        )


directory_shell = DirectoryShell(directory_client, location_service, settings)
