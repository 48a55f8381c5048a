"""Default OpenWeatherMap endpoint settings."""

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
ONECALL_PATH = "/data/3.0/onecall"
DEFAULT_EXCLUDE: list[str] = ["hourly", "daily", "minutely", "alerts"]
DEFAULT_UNITS = "metric"
DEFAULT_TIMEOUT = 5.0
API_KEY_FILENAME = "api_key.txt"
DEFAULT_COORDINATE = "0.0"
