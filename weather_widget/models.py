from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


TemperatureUnit = Literal["celsius", "fahrenheit"]
WindUnit = Literal["kmh", "mph"]
PrecipitationUnit = Literal["mm", "in"]


class UnitSelection(BaseModel):
    """Per-dimension unit choice. Every combination is valid."""

    model_config = ConfigDict(frozen=True)

    temperature: TemperatureUnit = "celsius"
    wind: WindUnit = "kmh"
    precipitation: PrecipitationUnit = "mm"

    @property
    def is_metric_temperature(self) -> bool:
        return self.temperature == "celsius"

    def toggled(self) -> "UnitSelection":
        # Only the temperature dimension decides the direction.
        return IMPERIAL if self.is_metric_temperature else METRIC


METRIC = UnitSelection(temperature="celsius", wind="kmh", precipitation="mm")
IMPERIAL = UnitSelection(temperature="fahrenheit", wind="mph", precipitation="in")


def units_for_system(system: str) -> UnitSelection:
    return IMPERIAL if system == "imperial" else METRIC


class Location(BaseModel):
    lat: float
    lon: float
    display_name: str

    @property
    def short_name(self) -> str:
        parts = self.display_name.split(",")
        if len(parts) > 1:
            return f"{parts[0].strip()}, {parts[-1].strip()}"
        return self.display_name


class Suggestion(BaseModel):
    display: str
    location: str


# ── Forecast payload (Open-Meteo field names, always metric when fetched) ────

class CurrentConditions(BaseModel):
    time: Optional[str] = None
    temperature_2m: float
    apparent_temperature: float
    relative_humidity_2m: float
    wind_speed_10m: float
    precipitation: float
    weather_code: int


class DailySeries(BaseModel):
    time: List[str] = Field(default_factory=list)
    weather_code: List[int] = Field(default_factory=list)
    temperature_2m_min: List[float] = Field(default_factory=list)
    temperature_2m_max: List[float] = Field(default_factory=list)

    @model_validator(mode="after")
    def _same_length(self) -> "DailySeries":
        n = len(self.time)
        if not (len(self.weather_code) == len(self.temperature_2m_min) == len(self.temperature_2m_max) == n):
            raise ValueError("daily series must all have the same length")
        return self


class HourlySeries(BaseModel):
    time: List[str] = Field(default_factory=list)
    temperature_2m: List[float] = Field(default_factory=list)
    weather_code: List[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def _same_length(self) -> "HourlySeries":
        if not (len(self.temperature_2m) == len(self.weather_code) == len(self.time)):
            raise ValueError("hourly series must all have the same length")
        return self


class Forecast(BaseModel):
    """A forecast for one place.

    Fetched forecasts are metric (°C, km/h, mm) and are never modified once
    stored; converted copies for display share the same shape.
    """

    location_name: str
    latitude: float
    longitude: float
    current: CurrentConditions
    daily: DailySeries
    hourly: HourlySeries

    @classmethod
    def from_open_meteo(cls, payload: Dict[str, Any], location_name: str) -> "Forecast":
        return cls(
            location_name=location_name,
            latitude=payload["latitude"],
            longitude=payload["longitude"],
            current=payload["current"],
            daily=payload["daily"],
            hourly=payload["hourly"],
        )


# ── Rendered view ────────────────────────────────────────────────────────────

class CurrentView(BaseModel):
    location: str
    date: str
    icon: str
    temperature: str
    apparent_temperature: str
    humidity: str
    wind_speed: str
    precipitation: str


class DailyCard(BaseModel):
    date: str
    day: str
    icon: str
    temperature_min: str
    temperature_max: str


class DayOption(BaseModel):
    value: str
    label: str


class HourlyCard(BaseModel):
    time: str
    hour: str
    icon: str
    temperature: str


class WidgetView(BaseModel):
    current: Optional[CurrentView] = None
    daily: List[DailyCard] = Field(default_factory=list)
    days: List[DayOption] = Field(default_factory=list)
    selected_day: Optional[str] = None
    hourly: List[HourlyCard] = Field(default_factory=list)
    active_units: List[str] = Field(default_factory=list)
    toggle_label: str = "Switch to Imperial"


# ── HTTP bodies ──────────────────────────────────────────────────────────────

class SearchRequest(BaseModel):
    location: str = Field(..., min_length=1)


class DayRequest(BaseModel):
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")


class WidgetResponse(BaseModel):
    updated: bool
    units: UnitSelection
    view: Optional[WidgetView] = None
