"""Tests for the static locator and timeout mapping."""

import asyncio

import pytest

from skycast.ingest.geolocation import (
    GeolocationError,
    GeolocationErrorCode,
    StaticLocator,
    locate_with_timeout,
)
from skycast.models.weather import Coordinates


class _HangingLocator:
    async def locate(self, timeout: float) -> Coordinates:
        await asyncio.sleep(10)
        return Coordinates(0, 0)


class TestStaticLocator:
    def test_returns_position(self):
        coords = asyncio.run(StaticLocator(5.6, -0.19).locate(10))
        assert coords == Coordinates(5.6, -0.19)

    def test_without_position_is_unavailable(self):
        with pytest.raises(GeolocationError) as exc_info:
            asyncio.run(StaticLocator().locate(10))
        assert exc_info.value.code is GeolocationErrorCode.POSITION_UNAVAILABLE


class TestLocateWithTimeout:
    def test_overrun_maps_to_timeout(self):
        with pytest.raises(GeolocationError) as exc_info:
            asyncio.run(locate_with_timeout(_HangingLocator(), 0.01))
        assert exc_info.value.code is GeolocationErrorCode.TIMEOUT

    def test_passes_through(self):
        coords = asyncio.run(locate_with_timeout(StaticLocator(1, 2), 1))
        assert coords == Coordinates(1, 2)
