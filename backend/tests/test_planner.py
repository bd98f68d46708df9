from conftest import FakeBackend, FakeWeather, client_returning, failing_client

from trip_planner.llm.client import GenerativeClient
from trip_planner.models.domain import ForecastDay
from trip_planner.models.schemas import PlanRequest
from trip_planner.services.itinerary import FALLBACK_DAYS, WEATHER_UNAVAILABLE
from trip_planner.services.planning_service import PlanStage, PlanningService

FORECAST = [
    ForecastDay(date="2025-12-01 09:00:00", description="clear sky", temperature="30.2°C"),
]


def _assert_complete(itinerary):
    assert len(itinerary.days) >= 1
    for day in itinerary.days:
        assert day.activities and all(day.activities)
        assert day.hospital and day.pharmacy and day.tip and day.weather


def test_plan_merges_model_output_with_forecast(goa_request, model_text):
    service = PlanningService(weather_tool=FakeWeather(FORECAST), generative_client=client_returning(model_text))

    outcome = service.run(goa_request)

    assert outcome.failure is None
    assert outcome.stages == (
        PlanStage.validating,
        PlanStage.weather_fetch,
        PlanStage.prompting,
        PlanStage.generating,
        PlanStage.extracting,
        PlanStage.merging,
        PlanStage.done,
    )
    itinerary = outcome.itinerary
    assert [d.day for d in itinerary.days] == [1, 2]
    assert itinerary.days[0].activities == ["Fort Aguada", "Candolim beach"]
    assert itinerary.days[0].weather == "clear sky, 30.2°C"
    assert itinerary.days[1].weather == WEATHER_UNAVAILABLE
    assert itinerary.meta.destination == "Goa"
    assert itinerary.meta.start_date == "2025-12-01"
    assert itinerary.degraded is False
    _assert_complete(itinerary)


def test_empty_forecast_marks_every_day_unavailable(goa_request, model_text):
    service = PlanningService(weather_tool=FakeWeather([]), generative_client=client_returning(model_text))

    itinerary = service.plan_trip(goa_request)

    assert all(d.weather == WEATHER_UNAVAILABLE for d in itinerary.days)
    assert itinerary.degraded is False


def test_generation_failure_returns_fallback_template(goa_request):
    service = PlanningService(weather_tool=FakeWeather(FORECAST), generative_client=failing_client())

    outcome = service.run(goa_request)

    assert outcome.stages[-2:] == (PlanStage.fallback, PlanStage.done)
    assert PlanStage.extracting not in outcome.stages
    assert outcome.degraded
    days = outcome.itinerary.days
    assert len(days) == 3
    for day, template in zip(days, FALLBACK_DAYS):
        assert day.activities == template["activities"]
        assert day.hospital == template["hospital"]
        assert day.weather == template["weather"]
    assert outcome.itinerary.meta.destination == "Goa"
    assert outcome.itinerary.meta.budget == 25000


def test_unparseable_model_output_falls_back(goa_request):
    service = PlanningService(
        weather_tool=FakeWeather(FORECAST),
        generative_client=client_returning("Sure! Here is your trip: day one, beach."),
    )

    outcome = service.run(goa_request)

    assert outcome.failure.kind == "parse_failure"
    assert PlanStage.extracting in outcome.stages
    assert PlanStage.merging not in outcome.stages
    assert outcome.itinerary.degraded


def test_weather_exception_triggers_fallback(goa_request, model_text):
    backend = FakeBackend(text=model_text)
    service = PlanningService(
        weather_tool=FakeWeather(error=ConnectionError("owm down")),
        generative_client=GenerativeClient(backend=backend),
    )

    outcome = service.run(goa_request)

    assert outcome.stages == (
        PlanStage.validating,
        PlanStage.weather_fetch,
        PlanStage.fallback,
        PlanStage.done,
    )
    assert backend.prompts == []


def test_missing_fields_use_defaults_and_skip_upstream():
    weather = FakeWeather(FORECAST)
    backend = FakeBackend(text="{}")
    service = PlanningService(weather_tool=weather, generative_client=GenerativeClient(backend=backend))

    outcome = service.run(PlanRequest(destination="Goa"))

    assert outcome.failure.kind == "validation_gap"
    assert weather.calls == [] and backend.prompts == []
    meta = outcome.itinerary.meta
    assert (meta.destination, meta.start_date, meta.end_date, meta.budget, meta.theme) == ("Goa", "", "", 0, "")
    _assert_complete(outcome.itinerary)


def test_invalid_date_range_is_a_validation_gap(goa_request):
    request = goa_request.model_copy(update={"end_date": "2025-11-01"})
    service = PlanningService(weather_tool=FakeWeather(), generative_client=failing_client())

    outcome = service.run(request)

    assert outcome.failure.kind == "validation_gap"
    assert outcome.itinerary.meta.end_date == "2025-11-01"


def test_forced_failure_is_deterministic(goa_request):
    service = PlanningService(
        weather_tool=FakeWeather(error=TimeoutError()),
        generative_client=failing_client(),
    )

    first = service.plan_trip(goa_request)
    second = service.plan_trip(goa_request)

    assert first == second


def test_goa_example_with_all_upstreams_down(goa_request):
    service = PlanningService(weather_tool=FakeWeather([]), generative_client=GenerativeClient(backend=None))

    itinerary = service.plan_trip(goa_request)

    assert len(itinerary.days) == 3
    assert all(d.weather == WEATHER_UNAVAILABLE for d in itinerary.days)
    assert itinerary.meta.destination == "Goa"
    _assert_complete(itinerary)


def test_prompt_sent_to_model_carries_trip_parameters(goa_request, model_text):
    backend = FakeBackend(text=model_text)
    service = PlanningService(weather_tool=FakeWeather(), generative_client=GenerativeClient(backend=backend))

    service.plan_trip(goa_request)

    (prompt,) = backend.prompts
    assert "Create a travel itinerary for Goa." in prompt
    assert "Dates: 2025-12-01 to 2025-12-03." in prompt
    assert "Budget: INR 25000." in prompt
