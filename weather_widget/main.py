from typing import List

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from weather_widget import events as ev
from weather_widget.config import settings
from weather_widget.controller import build_widget
from weather_widget.log_setup import setup_logger
from weather_widget.models import (
    DayRequest,
    SearchRequest,
    Suggestion,
    UnitSelection,
    WidgetResponse,
    units_for_system,
)
from weather_widget.services.cache import RedisCache
from weather_widget.services.geocoding import NominatimClient
from weather_widget.services.openmeteo import OpenMeteoClient

setup_logger(level=settings.log_level)

app = FastAPI(title=settings.app_name)

cache = RedisCache(settings.redis_url) if settings.redis_url else None
widget = build_widget(
    NominatimClient(
        settings.geocoding_base_url,
        user_agent=settings.http_user_agent,
        timeout_seconds=settings.http_timeout_seconds,
        cache=cache,
        cache_ttl_seconds=settings.cache_ttl_geocode_seconds,
    ),
    OpenMeteoClient(settings.forecast_base_url, timeout_seconds=settings.http_timeout_seconds),
    units=units_for_system(settings.default_units),
    hourly_hours=settings.hourly_window_hours,
    suggestion_limit=settings.suggestion_limit,
    suggestion_min_chars=settings.suggestion_min_chars,
)


@app.get("/health")
def health():
    return {"status": "ok", "service": settings.app_name}


@app.get("/")
def root():
    return JSONResponse({"service": settings.app_name, "docs": "/docs"})


# ── Search ───────────────────────────────────────────────────────────────────

@app.get("/v1/suggestions", response_model=List[Suggestion])
async def suggestions(q: str = Query("", description="Partial place name, e.g. 'Acc'")):
    return await widget.controller.fetch_suggestions(q)


@app.post("/v1/search", response_model=WidgetResponse)
async def search(body: SearchRequest):
    [forecast] = await widget.events.emit(ev.SEARCH, body.location)
    return _response(updated=forecast is not None)


# ── Units and day selection ──────────────────────────────────────────────────

@app.post("/v1/units", response_model=WidgetResponse)
async def change_units(body: UnitSelection):
    [updated] = await widget.events.emit(ev.UNITS, body)
    return _response(updated=updated)


@app.post("/v1/units/toggle", response_model=WidgetResponse)
async def toggle_units():
    [updated] = await widget.events.emit(ev.TOGGLE_ALL)
    return _response(updated=updated)


@app.post("/v1/day", response_model=WidgetResponse)
async def change_day(body: DayRequest):
    [updated] = await widget.events.emit(ev.DAY, body.date)
    return _response(updated=updated)


@app.get("/v1/view", response_model=WidgetResponse)
def view():
    return _response(updated=False)


def _response(updated: bool) -> WidgetResponse:
    return WidgetResponse(updated=updated, units=widget.state.units, view=widget.renderer.view)
