from weather_widget.models import Forecast, UnitSelection
from weather_widget.units import celsius_to_fahrenheit, kmh_to_mph, mm_to_inches


def convert_forecast(raw: Forecast, units: UnitSelection) -> Forecast:
    """Return a converted deep copy of a metric forecast.

    ``raw`` must be the forecast as fetched; passing an already converted copy
    converts it twice.
    """
    data = raw.model_copy(deep=True)
    current, daily, hourly = data.current, data.daily, data.hourly

    if units.temperature == "fahrenheit":
        current.temperature_2m = celsius_to_fahrenheit(current.temperature_2m)
        current.apparent_temperature = celsius_to_fahrenheit(current.apparent_temperature)
        daily.temperature_2m_min = [celsius_to_fahrenheit(t) for t in daily.temperature_2m_min]
        daily.temperature_2m_max = [celsius_to_fahrenheit(t) for t in daily.temperature_2m_max]
        hourly.temperature_2m = [celsius_to_fahrenheit(t) for t in hourly.temperature_2m]

    if units.wind == "mph":
        current.wind_speed_10m = kmh_to_mph(current.wind_speed_10m)

    if units.precipitation == "in":
        current.precipitation = mm_to_inches(current.precipitation)

    return data
