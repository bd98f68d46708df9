from fastapi import APIRouter, Depends

from trip_planner.api import get_planning_service
from trip_planner.models.schemas import ItineraryResponse, PlanRequest
from trip_planner.services.planning_service import PlanningService

router = APIRouter()


@router.post("/plan", response_model=ItineraryResponse)
def create_plan(
    request: PlanRequest,
    service: PlanningService = Depends(get_planning_service),
) -> ItineraryResponse:
    itinerary = service.plan_trip(request)
    return ItineraryResponse.from_domain(itinerary)
