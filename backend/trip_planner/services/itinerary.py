"""
Itinerary assembly shared by the generated and the fallback paths.

Both ``merge_itinerary`` and ``fallback_itinerary`` build days through
``make_itinerary_day`` and metadata through ``stamp_meta``, so the two paths
always produce the same field set.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from trip_planner.models.domain import ForecastDay, Itinerary, ItineraryDay, ItineraryMeta
from trip_planner.models.schemas import PlanRequest

WEATHER_UNAVAILABLE = "Weather unavailable"

PLACEHOLDER_ACTIVITY = "Explore the neighbourhood at your own pace"
PLACEHOLDER_HOSPITAL = "Ask your hotel for the nearest hospital"
PLACEHOLDER_PHARMACY = "Ask your hotel for the nearest pharmacy"
PLACEHOLDER_TIP = "Keep a copy of your ID and emergency contacts handy."

FALLBACK_DAYS = (
    {
        "activities": ["Check-in", "City walk", "Local dinner"],
        "hospital": "City General Hospital",
        "pharmacy": "Main St Pharmacy",
        "tip": "Carry water & sunscreen.",
        "weather": WEATHER_UNAVAILABLE,
    },
    {
        "activities": ["Beach morning", "Museum", "Seafood shack"],
        "hospital": "Harbor Hospital",
        "pharmacy": "Harbor Meds",
        "tip": "Book tickets in advance.",
        "weather": WEATHER_UNAVAILABLE,
    },
    {
        "activities": ["Market", "Sunset point", "Cafe crawl"],
        "hospital": "Central Clinic",
        "pharmacy": "Wellness Chemist",
        "tip": "Use public transport when possible.",
        "weather": WEATHER_UNAVAILABLE,
    },
)


def _text(value: Any, placeholder: str) -> str:
    if value is None:
        return placeholder
    text = str(value).strip()
    return text or placeholder


def _activities(value: Any) -> List[str]:
    if isinstance(value, str):
        items: Iterable[Any] = [value]
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        items = []
    cleaned = [str(item).strip() for item in items if item is not None and str(item).strip()]
    return cleaned or [PLACEHOLDER_ACTIVITY]


def make_itinerary_day(
    day: int,
    activities: Any,
    hospital: Any,
    pharmacy: Any,
    tip: Any,
    weather: Any,
) -> ItineraryDay:
    return ItineraryDay(
        day=day,
        activities=_activities(activities),
        hospital=_text(hospital, PLACEHOLDER_HOSPITAL),
        pharmacy=_text(pharmacy, PLACEHOLDER_PHARMACY),
        tip=_text(tip, PLACEHOLDER_TIP),
        weather=_text(weather, WEATHER_UNAVAILABLE),
    )


def stamp_meta(request: PlanRequest) -> ItineraryMeta:
    """Copy the request fields verbatim, with empty/zero defaults for gaps."""
    return ItineraryMeta(
        destination=request.destination or "",
        start_date=request.start_date or "",
        end_date=request.end_date or "",
        budget=request.budget or 0,
        theme=request.theme or "",
    )


def weather_for_day(forecast: Sequence[ForecastDay], index: int) -> str:
    if index < len(forecast):
        slot = forecast[index]
        return f"{slot.description}, {slot.temperature}"
    return WEATHER_UNAVAILABLE


def merge_itinerary(
    payload: dict, forecast: Sequence[ForecastDay], request: PlanRequest
) -> Itinerary:
    days = [
        make_itinerary_day(
            day=index + 1,
            activities=raw.get("activities"),
            hospital=raw.get("hospital"),
            pharmacy=raw.get("pharmacy"),
            tip=raw.get("tip"),
            weather=weather_for_day(forecast, index),
        )
        for index, raw in enumerate(payload["days"])
    ]
    return Itinerary(days=days, meta=stamp_meta(request), degraded=False)


def fallback_itinerary(request: Optional[PlanRequest] = None) -> Itinerary:
    days = [
        make_itinerary_day(day=index + 1, **template)
        for index, template in enumerate(FALLBACK_DAYS)
    ]
    return Itinerary(days=days, meta=stamp_meta(request or PlanRequest()), degraded=True)
