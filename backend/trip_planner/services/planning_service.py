import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, List, Optional, Tuple, TypeVar

from trip_planner.core.result import (
    Failure,
    FailureKind,
    Ok,
    Result,
    attempt,
    then,
    with_fallback,
)
from trip_planner.llm.client import GenerativeClient
from trip_planner.llm.extract import parse_itinerary_payload
from trip_planner.llm.prompts import build_itinerary_prompt
from trip_planner.llm.tools.weather_tool import WeatherTool
from trip_planner.models.domain import Itinerary, TripRequest
from trip_planner.models.schemas import PlanRequest
from trip_planner.services.itinerary import fallback_itinerary, merge_itinerary

logger = logging.getLogger(__name__)

T = TypeVar("T")

REQUIRED_FIELDS = ("destination", "start_date", "end_date", "budget", "theme")


class PlanStage(str, Enum):
    validating = "VALIDATING"
    weather_fetch = "WEATHER_FETCH"
    prompting = "PROMPTING"
    generating = "GENERATING"
    extracting = "EXTRACTING"
    merging = "MERGING"
    fallback = "FALLBACK"
    done = "DONE"


@dataclass(frozen=True)
class PlanOutcome:
    itinerary: Itinerary
    stages: Tuple[PlanStage, ...]
    failure: Optional[Failure] = None

    @property
    def degraded(self) -> bool:
        return self.failure is not None


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_trip_request(request: PlanRequest) -> Result[TripRequest]:
    missing = [name for name in REQUIRED_FIELDS if _blank(getattr(request, name))]
    if missing:
        return Failure(FailureKind.validation_gap, f"missing fields: {', '.join(missing)}")
    try:
        start = date.fromisoformat(request.start_date)
        end = date.fromisoformat(request.end_date)
    except ValueError as exc:
        return Failure(FailureKind.validation_gap, f"bad date: {exc}")
    if end < start:
        return Failure(FailureKind.validation_gap, "endDate is before startDate")
    if request.budget <= 0:
        return Failure(FailureKind.validation_gap, "budget must be positive")
    return Ok(
        TripRequest(
            destination=request.destination.strip(),
            start_date=start,
            end_date=end,
            budget=float(request.budget),
            theme=request.theme,
            interests=tuple(i for i in request.interests if i),
        )
    )


class PlanningService:
    """
    Runs VALIDATING -> WEATHER_FETCH -> PROMPTING -> GENERATING -> EXTRACTING
    -> MERGING -> DONE. A failure at any stage jumps to FALLBACK -> DONE.
    """

    def __init__(self, weather_tool: WeatherTool, generative_client: GenerativeClient):
        self.weather_tool = weather_tool
        self.generative_client = generative_client

    def plan_trip(self, request: PlanRequest) -> Itinerary:
        return self.run(request).itinerary

    def run(self, request: PlanRequest) -> PlanOutcome:
        stages: List[PlanStage] = [PlanStage.validating]

        def enter(
            stage: PlanStage,
            fn: Callable[[], T],
            kind: FailureKind = FailureKind.upstream_unavailable,
        ) -> Result[T]:
            stages.append(stage)
            logger.debug("Plan stage %s", stage.value)
            return attempt(fn, kind)

        def extract(text: str) -> Result[dict]:
            stages.append(PlanStage.extracting)
            return parse_itinerary_payload(text)

        trip = validate_trip_request(request)
        forecast = then(
            trip, lambda t: enter(PlanStage.weather_fetch, lambda: self.weather_tool.forecast(t.destination))
        )
        prompt = then(
            forecast,
            lambda _: enter(
                PlanStage.prompting,
                lambda: build_itinerary_prompt(
                    destination=trip.value.destination,
                    start=trip.value.start_date,
                    end=trip.value.end_date,
                    budget=trip.value.budget,
                    theme=trip.value.theme,
                    interests=trip.value.interests,
                ),
            ),
        )
        raw = then(prompt, lambda p: enter(PlanStage.generating, lambda: self.generative_client.generate(p)))
        payload = then(raw, extract)
        merged = then(
            payload,
            lambda data: enter(
                PlanStage.merging,
                lambda: merge_itinerary(data, forecast.value, request),
                FailureKind.parse_failure,
            ),
        )

        failure = merged if isinstance(merged, Failure) else None
        if failure is not None:
            stages.append(PlanStage.fallback)
        itinerary = with_fallback(merged, lambda _: fallback_itinerary(request))
        stages.append(PlanStage.done)

        if failure is None:
            logger.info(
                "Generated %d-day itinerary for %s", len(itinerary.days), itinerary.meta.destination
            )
        return PlanOutcome(itinerary=itinerary, stages=tuple(stages), failure=failure)
