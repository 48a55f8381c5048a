"""Temperature severity bands and their status-line colors."""

from enum import StrEnum


class TemperatureBand(StrEnum):
    FREEZING = "freezing"
    MILD = "mild"
    WARM = "warm"
    HOT = "hot"


FREEZING_BELOW_C = 0.0
WARM_FROM_C = 28.0
HOT_FROM_C = 35.0

BAND_COLORS: dict[TemperatureBand, str] = {
    TemperatureBand.FREEZING: "\x1b[46;30m",
    TemperatureBand.MILD: "\x1b[42;30m",
    TemperatureBand.WARM: "\x1b[43;30m",
    TemperatureBand.HOT: "\x1b[41;30m",
}


def band(temp_c: float) -> TemperatureBand:
    if temp_c < FREEZING_BELOW_C:
        return TemperatureBand.FREEZING
    if temp_c < WARM_FROM_C:
        return TemperatureBand.MILD
    if temp_c < HOT_FROM_C:
        return TemperatureBand.WARM
    return TemperatureBand.HOT


def band_color(b: TemperatureBand) -> str:
    return BAND_COLORS[b]
