from fastapi import HTTPException
from starlette.requests import Request

from trip_planner.llm.tools.places_tool import PlacesTool
from trip_planner.services.booking_service import BookingService
from trip_planner.services.planning_service import PlanningService


def _from_state(request: Request, name: str):
    service = getattr(request.app.state, name, None)
    if service is None:
        raise HTTPException(status_code=500, detail=f"{name} not initialized")
    return service


def get_planning_service(request: Request) -> PlanningService:
    return _from_state(request, "planning_service")


def get_booking_service(request: Request) -> BookingService:
    return _from_state(request, "booking_service")


def get_places_tool(request: Request) -> PlacesTool:
    return _from_state(request, "places_tool")
