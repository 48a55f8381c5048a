"""Report pipeline: one fetch, one classify/resolve/render pass."""

import logging

from barweather.classify import registry
from barweather.classify.daynight import is_daytime
from barweather.config.schema import BarweatherConfig
from barweather.ingest.openweather_client import OpenWeatherClient
from barweather.models.weather import OneCallResponse, WeatherObservation
from barweather.reporting.formatters import format_observation_text, render

logger = logging.getLogger(__name__)


def build_line(observation: WeatherObservation) -> str:
    """Classify, resolve day/night and render. Never raises."""
    category = registry.classify(observation.code)
    if registry.condition(observation.code) is None:
        logger.warning("Unmapped weather code %d", observation.code)
    is_day = is_daytime(observation.observed_at, observation.sunrise, observation.sunset)
    logger.debug(
        "code=%d category=%s label=%s is_day=%s",
        observation.code, category, registry.label(category), is_day,
    )
    return render(observation, category, is_day)


class ReportPipeline:
    def __init__(
        self,
        config: BarweatherConfig,
        api_key: str,
        client: OpenWeatherClient | None = None,
    ):
        self.config = config
        self.client = client or OpenWeatherClient(
            api_key=api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            units=config.units,
            exclude=config.exclude,
        )

    def fetch(self, lat: str, lon: str) -> OneCallResponse:
        response = self.client.get_current(lat, lon)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Current conditions:\n%s", format_observation_text(response))
        return response

    def run(self, lat: str, lon: str) -> str:
        """Fetch current conditions and return the status line.

        Network, HTTP and decode errors propagate unchanged; nothing is
        rendered unless the whole response decoded.
        """
        response = self.fetch(lat, lon)
        return build_line(WeatherObservation.from_response(response))
