"""API key lookup: next to the executable first, then the working directory."""

import logging
import sys
from pathlib import Path

from barweather.config.defaults import API_KEY_FILENAME

logger = logging.getLogger(__name__)


def default_key_dirs() -> list[Path]:
    """Directory of the running executable, then the current directory."""
    exe_dir = Path(sys.argv[0]).resolve().parent
    return [exe_dir, Path.cwd()]


def load_api_key(
    search_dirs: list[Path] | None = None, filename: str = API_KEY_FILENAME
) -> str:
    """Read the API key from the first readable key file, stripped of newlines.

    A missing or unreadable file is not fatal: the key comes back empty and
    the provider rejects the request with 401.
    """
    if search_dirs is None:
        search_dirs = default_key_dirs()
    for directory in search_dirs:
        path = Path(directory) / filename
        try:
            raw = path.read_text()
        except OSError:
            continue
        logger.debug("Loaded API key from %s", path)
        return raw.replace("\n", "")
    logger.warning(
        "No %s found in %s, continuing without an API key",
        filename, ", ".join(str(d) for d in search_dirs),
    )
    return ""
