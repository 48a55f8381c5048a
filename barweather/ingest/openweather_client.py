"""OpenWeatherMap One Call 3.0 client. Single attempt, no retry."""

import logging

import httpx

from barweather.config.defaults import (
    DEFAULT_EXCLUDE,
    DEFAULT_TIMEOUT,
    DEFAULT_UNITS,
    ONECALL_PATH,
    OPENWEATHER_BASE_URL,
)
from barweather.models.weather import OneCallResponse

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = DEFAULT_UNITS,
        exclude: list[str] | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.units = units
        self.exclude = DEFAULT_EXCLUDE if exclude is None else exclude

    def get_current_raw(self, lat: str, lon: str) -> dict:
        """Fetch current conditions as decoded JSON.

        Raises httpx.HTTPStatusError on non-2xx, httpx.RequestError on
        transport failure and ValueError on a body that is not JSON.
        """
        url = f"{self.base_url}{ONECALL_PATH}"
        params = {
            "lat": lat,
            "lon": lon,
            "exclude": ",".join(self.exclude),
            "units": str(self.units),
            "appid": self.api_key,
        }
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "OpenWeather returned %d for lat=%s lon=%s",
                e.response.status_code, lat, lon,
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                "OpenWeather request failed for lat=%s lon=%s: %s", lat, lon, e
            )
            raise

    def get_current(self, lat: str, lon: str) -> OneCallResponse:
        """Fetch and validate current conditions.

        Raises pydantic.ValidationError when the payload does not match the
        One Call schema.
        """
        return OneCallResponse.model_validate(self.get_current_raw(lat, lon))
