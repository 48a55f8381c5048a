"""Weather condition codes and the semantic categories they collapse into."""

from enum import IntEnum, StrEnum


class WeatherCondition(IntEnum):
    """Provider wire codes, one member per documented OpenWeatherMap id."""

    THUNDERSTORM_WITH_LIGHT_RAIN = 200
    THUNDERSTORM_WITH_RAIN = 201
    THUNDERSTORM_WITH_HEAVY_RAIN = 202
    LIGHT_THUNDERSTORM = 210
    THUNDERSTORM = 211
    HEAVY_THUNDERSTORM = 212
    RAGGED_THUNDERSTORM = 221
    THUNDERSTORM_WITH_LIGHT_DRIZZLE = 230
    THUNDERSTORM_WITH_DRIZZLE = 231
    THUNDERSTORM_WITH_HEAVY_DRIZZLE = 232

    LIGHT_INTENSITY_DRIZZLE = 300
    DRIZZLE = 301
    HEAVY_INTENSITY_DRIZZLE = 302
    LIGHT_INTENSITY_DRIZZLE_RAIN = 310
    DRIZZLE_RAIN = 311
    HEAVY_INTENSITY_DRIZZLE_RAIN = 312
    SHOWER_RAIN_AND_DRIZZLE = 313
    HEAVY_SHOWER_RAIN_AND_DRIZZLE = 314
    SHOWER_DRIZZLE = 321

    LIGHT_RAIN = 500
    MODERATE_RAIN = 501
    HEAVY_INTENSITY_RAIN = 502
    VERY_HEAVY_RAIN = 503
    EXTREME_RAIN = 504
    FREEZING_RAIN = 511
    LIGHT_INTENSITY_SHOWER_RAIN = 520
    SHOWER_RAIN = 521
    HEAVY_INTENSITY_SHOWER_RAIN = 522
    RAGGED_SHOWER_RAIN = 531

    LIGHT_SNOW = 600
    SNOW = 601
    HEAVY_SNOW = 602
    SLEET = 611
    LIGHT_SHOWER_SLEET = 612
    SHOWER_SLEET = 613
    LIGHT_RAIN_AND_SNOW = 615
    RAIN_AND_SNOW = 616
    LIGHT_SHOWER_SNOW = 620
    SHOWER_SNOW = 621
    HEAVY_SHOWER_SNOW = 622

    MIST = 701
    SMOKE = 711
    HAZE = 721
    SAND_DUST_WHIRLS = 731
    FOG = 741
    SAND = 751
    DUST = 761
    ASH = 762
    SQUALL = 771
    TORNADO = 781

    CLEAR = 800
    FEW_CLOUDS = 801
    SCATTERED_CLOUDS = 802
    BROKEN_CLOUDS = 803
    OVERCAST_CLOUDS = 804


class WeatherCategory(StrEnum):
    THUNDERSTORM_WITH_RAIN = "thunderstorm_with_rain"
    THUNDERSTORM = "thunderstorm"
    THUNDERSTORM_WITH_DRIZZLE = "thunderstorm_with_drizzle"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"
    SHOWER_SLEET = "shower_sleet"
    RAIN_AND_SNOW = "rain_and_snow"
    MIST = "mist"
    SMOKE = "smoke"
    HAZE = "haze"
    SAND_DUST_WHIRLS = "sand_dust_whirls"
    FOG = "fog"
    SAND = "sand"
    DUST = "dust"
    ASH = "ash"
    SQUALL = "squall"
    TORNADO = "tornado"
    CLEAR = "clear"
    FEW_CLOUDS = "few_clouds"
    SCATTERED_CLOUDS = "scattered_clouds"
    BROKEN_CLOUDS = "broken_clouds"
    OVERCAST_CLOUDS = "overcast_clouds"
    UNKNOWN = "unknown"
