"""Geolocation capability: a locator yields coordinates or a typed failure."""

import asyncio
import logging
from enum import StrEnum
from typing import Protocol

from skycast.models.weather import Coordinates

logger = logging.getLogger(__name__)


class GeolocationErrorCode(StrEnum):
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"


class GeolocationError(Exception):
    def __init__(self, code: GeolocationErrorCode, message: str = ""):
        super().__init__(message or code.value)
        self.code = code


class Locator(Protocol):
    async def locate(self, timeout: float) -> Coordinates: ...


class StaticLocator:
    """Serves a fixed position, e.g. from the command line or config.

    Without a position it behaves like a device that cannot determine one.
    """

    def __init__(self, lat: float | None = None, lon: float | None = None):
        self.lat = lat
        self.lon = lon

    async def locate(self, timeout: float) -> Coordinates:
        if self.lat is None or self.lon is None:
            raise GeolocationError(
                GeolocationErrorCode.POSITION_UNAVAILABLE, "No position configured"
            )
        return Coordinates(lat=self.lat, lon=self.lon)


async def locate_with_timeout(locator: Locator, timeout: float) -> Coordinates:
    """Run a locator, mapping an overrun of ``timeout`` seconds to TIMEOUT."""
    try:
        return await asyncio.wait_for(locator.locate(timeout), timeout)
    except TimeoutError as e:
        logger.warning("Geolocation timed out after %.1fs", timeout)
        raise GeolocationError(GeolocationErrorCode.TIMEOUT) from e
