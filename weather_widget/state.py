from dataclasses import dataclass, field
from typing import Optional

from weather_widget.models import METRIC, Forecast, UnitSelection


@dataclass
class WidgetState:
    """
    The one piece of mutable widget state:
      raw forecast (metric, replaced wholesale) + unit selection + selected day
    """

    forecast: Optional[Forecast] = None
    units: UnitSelection = field(default=METRIC)
    selected_day: Optional[str] = None

    @property
    def has_forecast(self) -> bool:
        return self.forecast is not None

    def store_forecast(self, forecast: Forecast) -> None:
        self.forecast = forecast
        self.selected_day = forecast.daily.time[0] if forecast.daily.time else None
