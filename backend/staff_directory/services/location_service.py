"""One-shot current-position lookup standing in for the device location API."""

from __future__ import annotations

import asyncio
import logging
import math
from enum import Enum

import aiohttp

from staff_directory.core.config import Settings

logger = logging.getLogger(__name__)


class LocationErrorReason(str, Enum):
    DENIED = "denied"
    UNSUPPORTED = "unsupported"
    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"


LOCATION_ERROR_MESSAGES: dict[LocationErrorReason, str] = {
    LocationErrorReason.DENIED: "Location access is required to submit the form.",
    LocationErrorReason.UNSUPPORTED: "Geolocation is not supported by this device.",
    LocationErrorReason.TIMEOUT: "Timed out while acquiring the current location.",
    LocationErrorReason.UNAVAILABLE: "Current location is unavailable.",
}


class LocationError(Exception):
    def __init__(self, reason: LocationErrorReason, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(detail or LOCATION_ERROR_MESSAGES[reason])

    @property
    def message(self) -> str:
        return LOCATION_ERROR_MESSAGES[self.reason]


def _as_coordinate(value: object) -> float:
    number = float(value)  # type: ignore[arg-type]
    if not math.isfinite(number):
        raise ValueError(f"Non-finite coordinate: {value!r}")
    return number


class LocationService:
    def __init__(self) -> None:
        self.initialized = False
        self.provider = "none"
        self.latitude: float | None = None
        self.longitude: float | None = None
        self.lookup_url = ""
        self.timeout_seconds = 10.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        provider = settings.LOCATION_PROVIDER.lower()
        if provider not in ("static", "ip"):
            logger.warning("No location provider configured, LocationService not initialized")
            return

        self.provider = provider
        self.latitude = settings.DEVICE_LATITUDE
        self.longitude = settings.DEVICE_LONGITUDE
        self.lookup_url = settings.LOCATION_LOOKUP_URL
        self.timeout_seconds = settings.LOCATION_TIMEOUT_SECONDS
        self.initialized = True
        logger.info("LocationService initialized (provider=%s)", provider)

    async def close(self) -> None:
        self.initialized = False
        self.provider = "none"

    async def get_current_position(self) -> tuple[float, float]:
        if not self.initialized:
            raise LocationError(LocationErrorReason.UNSUPPORTED, "LocationService not initialized")

        if self.provider == "static":
            if self.latitude is None or self.longitude is None:
                raise LocationError(LocationErrorReason.UNSUPPORTED, "No device coordinates configured")
            return self.latitude, self.longitude

        return await self._lookup_by_ip()

    async def _lookup_by_ip(self) -> tuple[float, float]:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.lookup_url) as response:
                    if response.status in (401, 403):
                        raise LocationError(LocationErrorReason.DENIED, f"Lookup refused: {response.status}")
                    if response.status != 200:
                        raise LocationError(LocationErrorReason.UNAVAILABLE, f"Lookup failed: {response.status}")
                    data = await response.json()
        except LocationError:
            raise
        except asyncio.TimeoutError as e:
            raise LocationError(LocationErrorReason.TIMEOUT, "Location lookup timed out") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise LocationError(LocationErrorReason.UNAVAILABLE, f"Location lookup failed: {e}") from e

        try:
            return _as_coordinate(data["latitude"]), _as_coordinate(data["longitude"])
        except (KeyError, TypeError, ValueError) as e:
            raise LocationError(LocationErrorReason.UNAVAILABLE, f"Malformed location payload: {e}") from e


location_service = LocationService()
