"""Weather code registry: wire code -> category -> label and day/night glyph.

Glyphs are Nerd Font private-use codepoints. Several categories share one
glyph for day and night (the atmospheric group, tornado, overcast clouds);
those pairs are intentional and must not be "fixed".
"""

from dataclasses import dataclass

from barweather.models.condition import WeatherCategory as Cat
from barweather.models.condition import WeatherCondition as Wc


@dataclass(frozen=True)
class IconSet:
    day: str
    night: str


DEFAULT_ICON = "\uf128"
UNKNOWN_LABEL = "UNKNOWN CODE"

CODE_TABLE: dict[int, Cat] = {
    Wc.THUNDERSTORM_WITH_LIGHT_RAIN: Cat.THUNDERSTORM_WITH_RAIN,
    Wc.THUNDERSTORM_WITH_RAIN: Cat.THUNDERSTORM_WITH_RAIN,
    Wc.THUNDERSTORM_WITH_HEAVY_RAIN: Cat.THUNDERSTORM_WITH_RAIN,
    Wc.LIGHT_THUNDERSTORM: Cat.THUNDERSTORM,
    Wc.THUNDERSTORM: Cat.THUNDERSTORM,
    Wc.HEAVY_THUNDERSTORM: Cat.THUNDERSTORM,
    Wc.RAGGED_THUNDERSTORM: Cat.THUNDERSTORM,
    Wc.THUNDERSTORM_WITH_LIGHT_DRIZZLE: Cat.THUNDERSTORM_WITH_DRIZZLE,
    Wc.THUNDERSTORM_WITH_DRIZZLE: Cat.THUNDERSTORM_WITH_DRIZZLE,
    Wc.THUNDERSTORM_WITH_HEAVY_DRIZZLE: Cat.THUNDERSTORM_WITH_DRIZZLE,
    Wc.LIGHT_INTENSITY_DRIZZLE: Cat.DRIZZLE,
    Wc.DRIZZLE: Cat.DRIZZLE,
    Wc.HEAVY_INTENSITY_DRIZZLE: Cat.DRIZZLE,
    Wc.LIGHT_INTENSITY_DRIZZLE_RAIN: Cat.DRIZZLE,
    Wc.DRIZZLE_RAIN: Cat.DRIZZLE,
    Wc.HEAVY_INTENSITY_DRIZZLE_RAIN: Cat.DRIZZLE,
    Wc.SHOWER_RAIN_AND_DRIZZLE: Cat.DRIZZLE,
    Wc.HEAVY_SHOWER_RAIN_AND_DRIZZLE: Cat.DRIZZLE,
    Wc.SHOWER_DRIZZLE: Cat.DRIZZLE,
    Wc.LIGHT_RAIN: Cat.RAIN,
    Wc.MODERATE_RAIN: Cat.RAIN,
    Wc.HEAVY_INTENSITY_RAIN: Cat.RAIN,
    Wc.VERY_HEAVY_RAIN: Cat.RAIN,
    Wc.EXTREME_RAIN: Cat.RAIN,
    Wc.FREEZING_RAIN: Cat.RAIN,
    Wc.LIGHT_INTENSITY_SHOWER_RAIN: Cat.RAIN,
    Wc.SHOWER_RAIN: Cat.RAIN,
    Wc.HEAVY_INTENSITY_SHOWER_RAIN: Cat.RAIN,
    Wc.RAGGED_SHOWER_RAIN: Cat.RAIN,
    Wc.LIGHT_SNOW: Cat.SNOW,
    Wc.SNOW: Cat.SNOW,
    Wc.HEAVY_SNOW: Cat.SNOW,
    Wc.SLEET: Cat.SLEET,
    Wc.LIGHT_SHOWER_SLEET: Cat.SHOWER_SLEET,
    Wc.SHOWER_SLEET: Cat.SHOWER_SLEET,
    Wc.LIGHT_RAIN_AND_SNOW: Cat.RAIN_AND_SNOW,
    Wc.RAIN_AND_SNOW: Cat.RAIN_AND_SNOW,
    Wc.LIGHT_SHOWER_SNOW: Cat.RAIN_AND_SNOW,
    Wc.SHOWER_SNOW: Cat.RAIN_AND_SNOW,
    Wc.HEAVY_SHOWER_SNOW: Cat.RAIN_AND_SNOW,
    Wc.MIST: Cat.MIST,
    Wc.SMOKE: Cat.SMOKE,
    Wc.HAZE: Cat.HAZE,
    Wc.SAND_DUST_WHIRLS: Cat.SAND_DUST_WHIRLS,
    Wc.FOG: Cat.FOG,
    Wc.SAND: Cat.SAND,
    Wc.DUST: Cat.DUST,
    Wc.ASH: Cat.ASH,
    Wc.SQUALL: Cat.SQUALL,
    Wc.TORNADO: Cat.TORNADO,
    Wc.CLEAR: Cat.CLEAR,
    Wc.FEW_CLOUDS: Cat.FEW_CLOUDS,
    Wc.SCATTERED_CLOUDS: Cat.SCATTERED_CLOUDS,
    Wc.BROKEN_CLOUDS: Cat.BROKEN_CLOUDS,
    Wc.OVERCAST_CLOUDS: Cat.OVERCAST_CLOUDS,
}

LABELS: dict[Cat, str] = {
    Cat.THUNDERSTORM_WITH_RAIN: "Thunderstorm With Rain",
    Cat.THUNDERSTORM: "Thunderstorm",
    Cat.THUNDERSTORM_WITH_DRIZZLE: "Thunderstorm With Drizzle",
    Cat.DRIZZLE: "Drizzle",
    Cat.RAIN: "Rain",
    Cat.SNOW: "Snow",
    Cat.SLEET: "Snow",
    Cat.SHOWER_SLEET: "Rain And Snow",
    Cat.RAIN_AND_SNOW: "Rain And Snow",
    Cat.MIST: "mist",
    Cat.SMOKE: "Smoke",
    Cat.HAZE: "Haze",
    Cat.SAND_DUST_WHIRLS: "Sand or Dust Whirls",
    Cat.FOG: "Fog",
    Cat.SAND: "Sand",
    Cat.DUST: "Dust",
    Cat.ASH: "Ash (volcanic)",
    Cat.SQUALL: "Squall",
    Cat.TORNADO: "Tornado",
    Cat.CLEAR: "Clear",
    Cat.FEW_CLOUDS: "Few Cloud",
    Cat.SCATTERED_CLOUDS: "Scattered Clouds",
    Cat.BROKEN_CLOUDS: "Broken Clouds",
    Cat.OVERCAST_CLOUDS: "Overcast Clouds",
}

ICONS: dict[Cat, IconSet] = {
    Cat.THUNDERSTORM_WITH_RAIN: IconSet(day="\ue30f", night="\ue338"),
    Cat.THUNDERSTORM: IconSet(day="\ue305", night="\ue330"),
    Cat.THUNDERSTORM_WITH_DRIZZLE: IconSet(day="\ue30e", night="\ue366"),
    Cat.DRIZZLE: IconSet(day="\ue309", night="\ue336"),
    Cat.RAIN: IconSet(day="\ue308", night="\ue333"),
    Cat.SNOW: IconSet(day="\ue30a", night="\ue335"),
    Cat.SLEET: IconSet(day="\ue30a", night="\ue3ab"),
    Cat.SHOWER_SLEET: IconSet(day="\ue3aa", night="\ue3ab"),
    Cat.RAIN_AND_SNOW: IconSet(day="\ue306", night="\ue331"),
    Cat.MIST: IconSet(day="\ue373", night="\ue373"),
    Cat.SMOKE: IconSet(day="\ue35c", night="\ue35c"),
    Cat.HAZE: IconSet(day="\ue3ae", night="\ue3ae"),
    Cat.SAND_DUST_WHIRLS: IconSet(day="\ue37a", night="\ue37a"),
    Cat.FOG: IconSet(day="\ue303", night="\ue303"),
    Cat.SAND: IconSet(day="\ue37a", night="\ue37a"),
    Cat.DUST: IconSet(day="\ue35d", night="\ue35d"),
    Cat.ASH: IconSet(day="\ue3c0", night="\ue3c0"),
    Cat.SQUALL: IconSet(day="\ue31e", night="\ue31e"),
    Cat.TORNADO: IconSet(day="\U000f0f38", night="\U000f0f38"),
    Cat.CLEAR: IconSet(day="\U000f0599", night="\U000f0594"),
    Cat.FEW_CLOUDS: IconSet(day="\U000f0595", night="\U000f0f31"),
    Cat.SCATTERED_CLOUDS: IconSet(day="\ue302", night="\ue37e"),
    Cat.BROKEN_CLOUDS: IconSet(day="\ue376", night="\ue37e"),
    Cat.OVERCAST_CLOUDS: IconSet(day="\ue312", night="\ue312"),
}


def classify(code: int) -> Cat:
    """Map a provider weather code to its category. Unlisted codes are UNKNOWN."""
    return CODE_TABLE.get(code, Cat.UNKNOWN)


def condition(code: int) -> Wc | None:
    """Return the wire-level condition for a code, or None if undocumented."""
    try:
        return Wc(code)
    except ValueError:
        return None


def label(category: Cat) -> str:
    return LABELS.get(category, UNKNOWN_LABEL)


def icon(category: Cat, is_day: bool) -> str:
    """Pick the day or night glyph, falling back to DEFAULT_ICON."""
    icons = ICONS.get(category)
    if icons is None:
        return DEFAULT_ICON
    return icons.day if is_day else icons.night
