"""Day/night resolution from the observation time and sunrise/sunset."""

from datetime import datetime


def to_local(ts: int) -> datetime:
    """Convert unix seconds to an aware datetime in the process's local timezone."""
    return datetime.fromtimestamp(ts).astimezone()


def is_daytime(observed_at: int, sunrise: int, sunset: int) -> bool:
    """True iff sunrise <= observed_at < sunset.

    Some response shapes omit sunrise/sunset (polar day and night); both then
    decode as 0 and the observation is treated as daytime.
    """
    if sunrise == 0 and sunset == 0:
        return True
    # Epoch seconds order the same as local instants, and stay valid outside
    # the range datetime can represent.
    return sunrise <= observed_at < sunset
