from fastapi import APIRouter, Depends

from trip_planner.api import get_booking_service
from trip_planner.models.schemas import BookingResponse, BookRequest
from trip_planner.services.booking_service import BookingService

router = APIRouter()


@router.post("/book", response_model=BookingResponse)
def book_trip(
    request: BookRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    booking = service.book_trip(request.to_domain())
    return BookingResponse.from_domain(booking)
