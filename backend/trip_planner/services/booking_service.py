from __future__ import annotations

import logging
from datetime import date
from typing import List, Tuple
from uuid import uuid4

from trip_planner.core.result import (
    Failure,
    FailureKind,
    Ok,
    Result,
    attempt,
    then,
    with_fallback,
)
from trip_planner.llm.tools.booking_tool import BookingBackendTool
from trip_planner.llm.tools.payment_tool import PaymentTool
from trip_planner.models.domain import (
    Booking,
    BookingRequest,
    BookingTotals,
    FlightLeg,
    HotelStay,
    Order,
    OrderStatus,
    Transfer,
    TripDetails,
)

logger = logging.getLogger(__name__)

OUTBOUND_FARE = 5200.0
RETURN_FARE = 5100.0
FLIGHT_VENDOR = "IndiGo"
FLIGHT_CLASS_MULTIPLIERS = {
    "economy": 1.0,
    "premium economy": 1.5,
    "business": 2.5,
    "first": 4.0,
}
HOTEL_RATE_PER_STAR = 2800.0 / 3
AIRPORT_TRANSFER_FARE = 800.0
DEFAULT_ORIGIN = "BLR"
DEFAULT_DESTINATION = "GOI"

QuotedRecords = Tuple[List[FlightLeg], HotelStay, List[Transfer]]


def trip_length(details: TripDetails) -> int:
    """Inclusive day count of the trip, at least 1."""
    try:
        start = date.fromisoformat(details.start_date)
        end = date.fromisoformat(details.end_date)
    except (TypeError, ValueError):
        return 1
    return max(1, (end - start).days + 1)


def nightly_rate(rating: int) -> float:
    stars = min(5, max(1, rating))
    return float(round(HOTEL_RATE_PER_STAR * stars))


def flight_multiplier(flight_class: str) -> float:
    return FLIGHT_CLASS_MULTIPLIERS.get((flight_class or "").strip().lower(), 1.0)


def _status(value) -> OrderStatus:
    try:
        return OrderStatus(str(value).upper())
    except ValueError:
        return OrderStatus.pending


class BookingService:
    """
    Produces a Booking either from the partner booking backend or, when that
    is unavailable, simulated, or failing, from fixed fares. Both paths return
    the same structure.
    """

    def __init__(
        self,
        backend: BookingBackendTool,
        payment_tool: PaymentTool,
        simulate: bool = True,
    ):
        self.backend = backend
        self.payment_tool = payment_tool
        self.simulate = simulate

    def book_trip(self, request: BookingRequest) -> Booking:
        booking = with_fallback(self._book_with_backend(request), lambda _: self.synthesize(request))
        logger.info(
            "Booking %s for user %s: grand total %.2f (simulated=%s)",
            booking.booking_id,
            request.user_id or "anonymous",
            booking.totals.grand_total,
            booking.simulated,
        )
        return booking

    def _book_with_backend(self, request: BookingRequest) -> Result[Booking]:
        if self.simulate:
            return Failure(FailureKind.upstream_unavailable, "booking simulation enabled")
        if not self.backend.configured:
            return Failure(FailureKind.upstream_unavailable, "booking backend not configured")

        details = request.details
        quote = attempt(
            lambda: self.backend.quote(
                {
                    "userId": request.user_id,
                    "origin": details.origin,
                    "destination": details.destination,
                    "startDate": details.start_date,
                    "endDate": details.end_date,
                    "travelers": details.travelers,
                    "flightClass": details.flight_class,
                    "hotelRating": details.hotel_rating,
                    "items": [{"day": i.day, "activities": list(i.activities)} for i in request.items],
                }
            )
        )
        totals = then(quote, self._totals_from_quote)
        records = then(totals, lambda _: self._records_from_quote(quote.value, details))
        confirmation = then(
            records,
            lambda _: attempt(
                lambda: self.backend.confirm(
                    quote.value["quoteId"],
                    {"userId": request.user_id, "travelers": details.travelers},
                )
            ),
        )
        return then(confirmation, lambda conf: self._assemble(request, totals.value, records.value, conf))

    @staticmethod
    def _totals_from_quote(quote: dict) -> Result[BookingTotals]:
        breakdown = quote.get("breakdown") or {}
        try:
            return Ok(
                BookingTotals(
                    flights=float(breakdown["flights"]),
                    hotel=float(breakdown["hotel"]),
                    transport=float(breakdown["transport"]),
                    activities=float(breakdown.get("activities", 0.0)),
                )
            )
        except (KeyError, TypeError, ValueError) as exc:
            return Failure(FailureKind.parse_failure, f"quote breakdown unusable: {exc}")

    def _records_from_quote(self, quote: dict, details: TripDetails) -> Result[QuotedRecords]:
        """
        Flight, hotel and transfer records as quoted by the partner. A record
        the quote leaves out is replaced by the indicative one; a record that
        is present but malformed rejects the whole quote.
        """
        try:
            flights = (
                [self._quoted_flight(leg, details) for leg in quote["flights"]]
                if quote.get("flights")
                else self._flights(details)
            )
            hotel = self._quoted_hotel(quote["hotel"], details) if quote.get("hotel") else self._hotel(details)
            transport = (
                [self._quoted_transfer(t, details) for t in quote["transport"]]
                if quote.get("transport")
                else self._transport(details)
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            return Failure(FailureKind.parse_failure, f"quote records unusable: {exc}")
        return Ok((flights, hotel, transport))

    @staticmethod
    def _quoted_flight(leg: dict, details: TripDetails) -> FlightLeg:
        return FlightLeg(
            vendor=str(leg.get("vendor") or FLIGHT_VENDOR),
            route=str(leg["route"]),
            flight_class=str(leg.get("class") or details.flight_class),
            price=float(leg["price"]),
            date=str(leg.get("date") or details.start_date),
        )

    @staticmethod
    def _quoted_hotel(hotel: dict, details: TripDetails) -> HotelStay:
        return HotelStay(
            name=str(hotel["name"]),
            check_in=str(hotel.get("checkIn") or details.start_date),
            check_out=str(hotel.get("checkOut") or details.end_date),
            rating=int(hotel.get("rating") or details.hotel_rating),
            price_per_night=float(hotel["pricePerNight"]),
            nights=int(hotel.get("nights") or trip_length(details)),
        )

    @staticmethod
    def _quoted_transfer(transfer: dict, details: TripDetails) -> Transfer:
        return Transfer(
            type=str(transfer["type"]),
            vendor=str(transfer.get("vendor") or ""),
            date=str(transfer.get("date") or details.start_date),
            price=float(transfer["price"]),
        )

    def _assemble(
        self,
        request: BookingRequest,
        totals: BookingTotals,
        records: QuotedRecords,
        confirmation: dict,
    ) -> Result[Booking]:
        booking_id = confirmation.get("bookingId")
        if not booking_id:
            return Failure(FailureKind.parse_failure, "confirmation without bookingId")
        order = Order(
            order_id=str(booking_id),
            amount=totals.grand_total,
            status=_status(confirmation.get("status")),
        )
        if self.payment_tool.configured:
            created = attempt(lambda: self.payment_tool.create_order(totals.grand_total, receipt=str(booking_id)))
            if isinstance(created, Failure):
                logger.warning("Payment order creation failed for %s: %s", booking_id, created)
            else:
                order = Order(order_id=str(created.value.get("id", booking_id)), amount=totals.grand_total, status=order.status)
        flights, hotel, transport = records
        return Ok(
            Booking(
                booking_id=str(booking_id),
                details=request.details,
                flights=flights,
                hotel=hotel,
                transport=transport,
                totals=totals,
                order=order,
                simulated=False,
            )
        )

    def synthesize(self, request: BookingRequest) -> Booking:
        details = request.details
        flights = self._flights(details)
        hotel = self._hotel(details)
        transport = self._transport(details)
        totals = BookingTotals(
            flights=sum(leg.price * details.travelers for leg in flights),
            hotel=hotel.price_per_night * hotel.nights,
            transport=sum(t.price for t in transport),
            activities=0.0,
        )
        suffix = uuid4().hex[:12]
        return Booking(
            booking_id=f"mock_{suffix}",
            details=details,
            flights=flights,
            hotel=hotel,
            transport=transport,
            totals=totals,
            order=Order(
                order_id=f"mock_order_{suffix}",
                amount=totals.grand_total,
                status=OrderStatus.confirmed,
            ),
            simulated=True,
        )

    @staticmethod
    def _flights(details: TripDetails) -> List[FlightLeg]:
        origin = details.origin or DEFAULT_ORIGIN
        destination = details.destination or DEFAULT_DESTINATION
        multiplier = flight_multiplier(details.flight_class)
        return [
            FlightLeg(
                vendor=FLIGHT_VENDOR,
                route=f"{origin} → {destination}",
                flight_class=details.flight_class,
                price=OUTBOUND_FARE * multiplier,
                date=details.start_date,
            ),
            FlightLeg(
                vendor=FLIGHT_VENDOR,
                route=f"{destination} → {origin}",
                flight_class=details.flight_class,
                price=RETURN_FARE * multiplier,
                date=details.end_date,
            ),
        ]

    @staticmethod
    def _hotel(details: TripDetails) -> HotelStay:
        return HotelStay(
            name=f"{details.hotel_rating}-Star City Hotel",
            check_in=details.start_date,
            check_out=details.end_date,
            rating=details.hotel_rating,
            price_per_night=nightly_rate(details.hotel_rating),
            nights=trip_length(details),
        )

    @staticmethod
    def _transport(details: TripDetails) -> List[Transfer]:
        return [
            Transfer(
                type="Airport Pickup",
                vendor="CityCabs",
                date=details.start_date,
                price=AIRPORT_TRANSFER_FARE,
            )
        ]
