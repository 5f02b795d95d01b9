from typing import Any, Dict, Iterable, List

from weather_widget.models import Suggestion

SETTLEMENT_TYPES = {"city", "town", "village", "suburb", "hamlet", "capital"}
SETTLEMENT_CLASSES = {"place", "boundary", "landuse"}


def is_settlement(candidate: Dict[str, Any]) -> bool:
    """Keep towns and cities; drop roads, buildings and the like."""
    if candidate.get("addresstype") in ("city", "town"):
        return True
    return candidate.get("type") in SETTLEMENT_TYPES and candidate.get("class") in SETTLEMENT_CLASSES


def short_display_name(display_name: str) -> str:
    parts = [p.strip() for p in display_name.split(",") if p.strip()]
    if not parts:
        return display_name
    city, country = parts[0], parts[-1]
    return city if city == country else f"{city}, {country}"


def to_suggestions(candidates: Iterable[Dict[str, Any]]) -> List[Suggestion]:
    return [
        Suggestion(display=short_display_name(c["display_name"]), location=c["display_name"])
        for c in candidates
        if c.get("display_name") and is_settlement(c)
    ]
