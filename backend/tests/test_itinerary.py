from trip_planner.models.domain import ForecastDay
from trip_planner.models.schemas import PlanRequest
from trip_planner.services.itinerary import (
    PLACEHOLDER_ACTIVITY,
    PLACEHOLDER_HOSPITAL,
    PLACEHOLDER_TIP,
    WEATHER_UNAVAILABLE,
    fallback_itinerary,
    make_itinerary_day,
    merge_itinerary,
    stamp_meta,
)

REQUEST = PlanRequest(
    destination="Kochi",
    start_date="2026-02-01",
    end_date="2026-02-02",
    budget=18000,
    theme="Relaxing",
)


def test_make_day_substitutes_placeholders():
    day = make_itinerary_day(day=2, activities=[], hospital="", pharmacy="Apollo", tip=None, weather=None)

    assert day.day == 2
    assert day.activities == [PLACEHOLDER_ACTIVITY]
    assert day.hospital == PLACEHOLDER_HOSPITAL
    assert day.pharmacy == "Apollo"
    assert day.tip == PLACEHOLDER_TIP
    assert day.weather == WEATHER_UNAVAILABLE


def test_make_day_coerces_activity_values():
    day = make_itinerary_day(day=1, activities="Backwater cruise", hospital="h", pharmacy="p", tip="t", weather="w")
    assert day.activities == ["Backwater cruise"]

    day = make_itinerary_day(day=1, activities=["Fort Kochi", " ", None, 42], hospital="h", pharmacy="p", tip="t", weather="w")
    assert day.activities == ["Fort Kochi", "42"]


def test_merge_renumbers_days_and_zips_forecast():
    payload = {"days": [{"day": 7, "activities": ["a"]}, {"day": 9, "activities": ["b"]}, {"activities": ["c"]}]}
    forecast = [
        ForecastDay(date="2026-02-01 06:00:00", description="light rain", temperature="27°C"),
        ForecastDay(date="2026-02-01 09:00:00", description="overcast clouds", temperature="28.5°C"),
    ]

    itinerary = merge_itinerary(payload, forecast, REQUEST)

    assert [d.day for d in itinerary.days] == [1, 2, 3]
    assert [d.weather for d in itinerary.days] == [
        "light rain, 27°C",
        "overcast clouds, 28.5°C",
        WEATHER_UNAVAILABLE,
    ]


def test_model_supplied_weather_is_ignored():
    payload = {"days": [{"activities": ["a"], "weather": "Sunny all day"}]}

    itinerary = merge_itinerary(payload, [], REQUEST)

    assert itinerary.days[0].weather == WEATHER_UNAVAILABLE


def test_meta_is_copied_verbatim():
    meta = stamp_meta(REQUEST)

    assert (meta.destination, meta.start_date, meta.end_date, meta.budget, meta.theme) == (
        "Kochi",
        "2026-02-01",
        "2026-02-02",
        18000,
        "Relaxing",
    )


def test_fallback_has_same_fields_as_merged_output():
    merged = merge_itinerary({"days": [{"activities": ["a"]}]}, [], REQUEST)
    fallback = fallback_itinerary(REQUEST)

    assert vars(merged.days[0]).keys() == vars(fallback.days[0]).keys()
    assert fallback.meta == merged.meta
    assert fallback.degraded and not merged.degraded


def test_fallback_without_request_uses_empty_defaults():
    itinerary = fallback_itinerary()

    assert len(itinerary.days) == 3
    assert itinerary.meta.destination == ""
    assert itinerary.meta.budget == 0
