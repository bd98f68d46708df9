from fastapi import APIRouter, Depends, Query

from trip_planner.api import get_places_tool
from trip_planner.llm.tools.places_tool import DEFAULT_CATEGORIES, PlacesTool
from trip_planner.models.schemas import PoiResponse, PointOfInterestSchema

router = APIRouter()


@router.get("/pois", response_model=PoiResponse)
def list_pois(
    city: str = Query(..., min_length=1),
    categories: str = Query(",".join(DEFAULT_CATEGORIES)),
    limit: int = Query(6, ge=1, le=20),
    places: PlacesTool = Depends(get_places_tool),
) -> PoiResponse:
    wanted = [c.strip() for c in categories.split(",") if c.strip()] or list(DEFAULT_CATEGORIES)
    pois = places.search_pois(city, categories=wanted, limit=limit)
    return PoiResponse(pois=[PointOfInterestSchema.from_domain(p) for p in pois])
