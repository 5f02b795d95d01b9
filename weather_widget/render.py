"""Turn forecasts into view models.

The renderers never look at widget state: the forecast (already converted) and
the unit selection are always passed in, and ``ViewRenderer.view`` holds the
result of the latest render calls.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Protocol

from weather_widget.models import (
    CurrentView,
    DailyCard,
    DayOption,
    Forecast,
    HourlyCard,
    UnitSelection,
    WidgetView,
)

ICON_PATH = "assets/images/icon-{}.webp"

_ICON_BY_CODE = {
    0: "sunny",
    1: "partly-cloudy",
    2: "partly-cloudy",
    3: "overcast",
    45: "fog",
    48: "fog",
    51: "drizzle",
    53: "drizzle",
    55: "drizzle",
    61: "rain",
    63: "rain",
    65: "rain",
    71: "snow",
    73: "snow",
    75: "snow",
    77: "snow",
    95: "storm",
    96: "storm",
    99: "storm",
}

TEMPERATURE_LABEL = "°"


def icon_for(code: int) -> str:
    """Map a WMO weather code to an icon asset; unknown codes show as sunny."""
    return ICON_PATH.format(_ICON_BY_CODE.get(code, "sunny"))


def wind_label(units: UnitSelection) -> str:
    return "mph" if units.wind == "mph" else "km/h"


def precipitation_label(units: UnitSelection) -> str:
    return "in" if units.precipitation == "in" else "mm"


def toggle_label(units: UnitSelection) -> str:
    return "Switch to Imperial" if units.is_metric_temperature else "Switch to Metric"


def format_long_date(day: date) -> str:
    # e.g. "Friday, Aug 29, 2025"
    return f"{day:%A}, {day:%b} {day.day}, {day.year}"


def format_hour(timestamp: str) -> str:
    hour = datetime.fromisoformat(timestamp).hour
    return f"{hour % 12 or 12} {'AM' if hour < 12 else 'PM'}"


def format_number(value: float, places: int = 0) -> str:
    """Round half away from zero, the way browsers round for display."""
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def _degrees(value: float) -> str:
    return f"{format_number(value)}{TEMPERATURE_LABEL}"


def active_units(units: UnitSelection) -> List[str]:
    return [
        f"temp-{units.temperature}",
        f"wind-{units.wind}",
        f"precip-{units.precipitation}",
    ]


def hourly_window(forecast: Forecast, day: str, hours: int) -> List[int]:
    """Indices of up to ``hours`` hourly entries starting at the first one on ``day``."""
    times = forecast.hourly.time
    start = next((i for i, t in enumerate(times) if t.startswith(day)), None)
    if start is None:
        return []
    return list(range(start, min(start + hours, len(times))))


class Renderer(Protocol):
    def render_current(self, forecast: Forecast, units: UnitSelection, today: Optional[date] = None) -> None: ...

    def render_daily(self, forecast: Forecast, units: UnitSelection) -> None: ...

    def render_day_selector(self, forecast: Forecast, selected: Optional[str]) -> None: ...

    def render_hourly(self, forecast: Forecast, units: UnitSelection, day: Optional[str]) -> None: ...

    def render_units(self, units: UnitSelection) -> None: ...


class ViewRenderer:
    def __init__(self, hourly_hours: int = 24):
        self.hourly_hours = hourly_hours
        self.view: Optional[WidgetView] = None

    def _ensure_view(self) -> WidgetView:
        if self.view is None:
            self.view = WidgetView()
        return self.view

    def render_current(self, forecast: Forecast, units: UnitSelection, today: Optional[date] = None) -> None:
        current = forecast.current
        self._ensure_view().current = CurrentView(
            location=forecast.location_name,
            date=format_long_date(today or date.today()),
            icon=icon_for(current.weather_code),
            temperature=_degrees(current.temperature_2m),
            apparent_temperature=_degrees(current.apparent_temperature),
            humidity=f"{current.relative_humidity_2m:g}%",
            wind_speed=f"{format_number(current.wind_speed_10m)} {wind_label(units)}",
            precipitation=f"{format_number(current.precipitation, 1)} {precipitation_label(units)}",
        )

    def render_daily(self, forecast: Forecast, units: UnitSelection) -> None:
        daily = forecast.daily
        self._ensure_view().daily = [
            DailyCard(
                date=day,
                day=f"{date.fromisoformat(day):%a}",
                icon=icon_for(daily.weather_code[i]),
                temperature_min=_degrees(daily.temperature_2m_min[i]),
                temperature_max=_degrees(daily.temperature_2m_max[i]),
            )
            for i, day in enumerate(daily.time)
        ]

    def render_day_selector(self, forecast: Forecast, selected: Optional[str]) -> None:
        view = self._ensure_view()
        view.days = [DayOption(value=day, label=f"{date.fromisoformat(day):%A}") for day in forecast.daily.time]
        view.selected_day = selected

    def render_hourly(self, forecast: Forecast, units: UnitSelection, day: Optional[str]) -> None:
        hourly = forecast.hourly
        indices = hourly_window(forecast, day, self.hourly_hours) if day else []
        view = self._ensure_view()
        view.selected_day = day
        view.hourly = [
            HourlyCard(
                time=hourly.time[i],
                hour=format_hour(hourly.time[i]),
                icon=icon_for(hourly.weather_code[i]),
                temperature=_degrees(hourly.temperature_2m[i]),
            )
            for i in indices
        ]

    def render_units(self, units: UnitSelection) -> None:
        view = self._ensure_view()
        view.active_units = active_units(units)
        view.toggle_label = toggle_label(units)
