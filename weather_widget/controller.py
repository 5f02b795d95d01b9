import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from pydantic import ValidationError

from weather_widget import events as ev
from weather_widget.events import EventSource
from weather_widget.models import Forecast, Suggestion, UnitSelection
from weather_widget.render import Renderer, ViewRenderer
from weather_widget.services.geocoding import NominatimClient
from weather_widget.services.openmeteo import OpenMeteoClient
from weather_widget.state import WidgetState
from weather_widget.suggestions import to_suggestions
from weather_widget.transform import convert_forecast

logger = logging.getLogger(__name__)


class WeatherController:
    """Fetches, stores and re-renders forecasts for one widget.

    Every render converts from the stored metric forecast, never from a
    previously converted copy.
    """

    def __init__(
        self,
        state: WidgetState,
        renderer: Renderer,
        geocoder: NominatimClient,
        forecaster: OpenMeteoClient,
        suggestion_limit: int = 5,
        suggestion_min_chars: int = 3,
        today: Callable[[], date] = date.today,
    ):
        self.state = state
        self.renderer = renderer
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.suggestion_limit = suggestion_limit
        self.suggestion_min_chars = suggestion_min_chars
        self.today = today

    async def fetch_weather_for_location(self, query: str) -> Optional[Forecast]:
        location = await self.geocoder.lookup(query)
        if location is None:
            return None

        payload = await self.forecaster.get_forecast(location.lat, location.lon)
        if payload is None:
            return None

        try:
            forecast = Forecast.from_open_meteo(payload, location_name=location.short_name)
        except (KeyError, ValidationError) as exc:
            logger.error("Unusable forecast payload for %r: %s", query, exc)
            return None

        # Last completed fetch wins.
        self.state.store_forecast(forecast)
        logger.info("Stored forecast for %s", forecast.location_name)
        self._render_all()
        return forecast

    async def fetch_suggestions(self, query: str) -> List[Suggestion]:
        query = query.strip()
        if len(query) < self.suggestion_min_chars:
            return []
        candidates = await self.geocoder.search(query, limit=self.suggestion_limit)
        return to_suggestions(candidates)

    def on_unit_change(self, units: UnitSelection) -> bool:
        if not self.state.has_forecast:
            logger.warning("No weather data available to convert.")
            return False

        self.state.units = units
        self._render_all()
        return True

    def toggle_all(self) -> bool:
        return self.on_unit_change(self.state.units.toggled())

    def on_day_change(self, day: str) -> bool:
        if not self.state.has_forecast:
            logger.warning("No weather data available for day %s.", day)
            return False
        if day not in self.state.forecast.daily.time:
            logger.warning("Day %s is not in the daily forecast.", day)
            return False

        self.state.selected_day = day
        display = convert_forecast(self.state.forecast, self.state.units)
        self.renderer.render_hourly(display, self.state.units, day)
        return True

    def _render_all(self) -> None:
        units = self.state.units
        display = convert_forecast(self.state.forecast, units)
        self.renderer.render_current(display, units, self.today())
        self.renderer.render_daily(display, units)
        self.renderer.render_day_selector(display, self.state.selected_day)
        self.renderer.render_hourly(display, units, self.state.selected_day)
        self.renderer.render_units(units)


def register_handlers(source: EventSource, controller: WeatherController) -> None:
    source.on(ev.SEARCH, controller.fetch_weather_for_location)
    source.on(ev.UNITS, controller.on_unit_change)
    source.on(ev.TOGGLE_ALL, controller.toggle_all)
    source.on(ev.DAY, controller.on_day_change)


@dataclass
class Widget:
    state: WidgetState
    renderer: ViewRenderer
    controller: WeatherController
    events: EventSource


def build_widget(
    geocoder: NominatimClient,
    forecaster: OpenMeteoClient,
    units: Optional[UnitSelection] = None,
    hourly_hours: int = 24,
    suggestion_limit: int = 5,
    suggestion_min_chars: int = 3,
    today: Callable[[], date] = date.today,
) -> Widget:
    state = WidgetState() if units is None else WidgetState(units=units)
    renderer = ViewRenderer(hourly_hours=hourly_hours)
    controller = WeatherController(
        state,
        renderer,
        geocoder,
        forecaster,
        suggestion_limit=suggestion_limit,
        suggestion_min_chars=suggestion_min_chars,
        today=today,
    )
    source = EventSource()
    register_handlers(source, controller)
    return Widget(state=state, renderer=renderer, controller=controller, events=source)
