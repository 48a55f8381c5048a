"""Output formatters for the status line and the verbose conditions dump."""

from datetime import datetime, timedelta

from barweather.classify import registry
from barweather.classify.bands import band, band_color
from barweather.classify.daynight import to_local
from barweather.models.condition import WeatherCategory
from barweather.models.weather import OneCallResponse, WeatherObservation

RESET = "\x1b[0m"
CONDITION_COLOR = "\x1b[47;30m"
SUNRISE_COLOR = "\x1b[30;43m"
SUNSET_COLOR = "\x1b[30;44m"

THERMOMETER_GLYPH = "\uf2c9"
CELSIUS_GLYPH = "\U000f0504"
SUNRISE_GLYPH = "\ue34c"
SUNSET_GLYPH = "\ue34d"


def format_temperature(temp: float) -> str:
    """Shortest decimal form of a temperature: 20.0 -> '20', 20.5 -> '20.5'."""
    text = repr(float(temp))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_clock(ts: int) -> str:
    """Local wall-clock HH:MM for unix seconds.

    Timestamps outside the datetime range use the current local UTC offset.
    """
    try:
        return to_local(ts).strftime("%H:%M")
    except (OverflowError, OSError, ValueError):
        offset = datetime.now().astimezone().utcoffset() or timedelta(0)
        minute_of_day = ((ts + int(offset.total_seconds())) // 60) % (24 * 60)
        return f"{minute_of_day // 60:02d}:{minute_of_day % 60:02d}"


def render(
    observation: WeatherObservation, category: WeatherCategory, is_day: bool
) -> str:
    """Single status-bar line: condition, temperature, sunrise, sunset blocks."""
    glyph = registry.icon(category, is_day)
    color = band_color(band(observation.temperature))
    return (
        f"{CONDITION_COLOR} {glyph} {observation.description} {RESET} "
        f"{color} {THERMOMETER_GLYPH}"
        f"{format_temperature(observation.temperature)}{CELSIUS_GLYPH} {RESET} "
        f"{SUNRISE_COLOR} {SUNRISE_GLYPH}{format_clock(observation.sunrise)} {RESET} "
        f"{SUNSET_COLOR} {SUNSET_GLYPH}{format_clock(observation.sunset)} {RESET}"
    )


def format_observation_text(response: OneCallResponse) -> str:
    """Plain text dump of the full current conditions for debug logging."""
    c = response.current
    category = registry.classify(c.weather[0].id)
    lines = [
        f"lat: {response.lat}, lon: {response.lon}, tz: {response.timezone}",
        "WEATHER DATA",
        f"dt: {c.dt}",
        f"sunrise: {c.sunrise} | sunset: {c.sunset}",
        f"temp: {c.temp} | feels like: {c.feels_like}",
        f"pressure: {c.pressure} | humidity: {c.humidity}",
        f"dew_point: {c.dew_point}",
        f"uvi: {c.uvi} | clouds cover: {c.clouds}",
        f"visibility: {c.visibility}",
        f"wind speed: {c.wind_speed} | deg: {c.wind_deg} | gust: {c.wind_gust}",
        f"Weather: {registry.label(category)}",
    ]
    return "\n".join(lines)
