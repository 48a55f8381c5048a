"""CLI entry point for the status-bar weather line."""

import argparse
import logging

import httpx

from barweather.config.defaults import DEFAULT_COORDINATE
from barweather.config.loader import load_api_key
from barweather.config.schema import BarweatherConfig
from barweather.pipeline.report_pipeline import ReportPipeline

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    # No help text; extra arguments are ignored.
    parser = argparse.ArgumentParser(prog="barweather", add_help=False)
    parser.add_argument("latitude", nargs="?", default=DEFAULT_COORDINATE)
    parser.add_argument("longitude", nargs="?", default=DEFAULT_COORDINATE)
    parser.add_argument("-v", "--verbose", action="store_true")
    args, extra = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if extra:
        logger.debug("Ignoring extra arguments: %s", extra)

    config = BarweatherConfig()
    api_key = load_api_key(filename=config.api_key_filename)
    pipeline = ReportPipeline(config, api_key)

    try:
        line = pipeline.run(args.latitude, args.longitude)
    except (httpx.HTTPError, ValueError) as e:
        # ValueError covers JSON, UTF-8 and pydantic validation failures
        logger.error("Weather fetch failed: %s", e)
        return 1

    print(line)
    return 0
