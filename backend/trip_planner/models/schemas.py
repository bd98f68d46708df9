import math
import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from trip_planner.llm.tools.places_tool import PointOfInterest
from trip_planner.models.domain import (
    Booking,
    BookingItem,
    BookingRequest,
    FlightLeg,
    HotelStay,
    Itinerary,
    ItineraryDay,
    ItineraryMeta,
    OrderStatus,
    Transfer,
    TripDetails,
)

_INT_RE = re.compile(r"-?\d+")


def lax_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def lax_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, (int, float)) and math.isfinite(value):
        return float(value)
    return None


def lax_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _INT_RE.search(value)
        return int(match.group()) if match else None
    return None


def lax_str_list(value: Any) -> List[str]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        return []
    return [
        str(item).strip()
        for item in value
        if isinstance(item, (str, int, float)) and not isinstance(item, bool) and str(item).strip()
    ]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LaxRequestModel(CamelModel):
    """Request bodies never fail validation; unusable values become gaps."""

    @model_validator(mode="before")
    @classmethod
    def _require_object(cls, data: Any) -> Any:
        return data if isinstance(data, (dict, cls)) else {}


class PlanRequest(LaxRequestModel):
    """Inbound /plan body. Every field is optional; gaps are filled downstream."""

    destination: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    budget: Optional[float] = None
    theme: Optional[str] = None
    interests: List[str] = Field(default_factory=list)

    @field_validator("destination", "start_date", "end_date", "theme", mode="before")
    @classmethod
    def _text_or_gap(cls, value: Any) -> Optional[str]:
        return lax_str(value)

    @field_validator("budget", mode="before")
    @classmethod
    def _budget_or_gap(cls, value: Any) -> Optional[float]:
        return lax_float(value)

    @field_validator("interests", mode="before")
    @classmethod
    def _interest_list(cls, value: Any) -> List[str]:
        return lax_str_list(value)


class ItineraryDaySchema(CamelModel):
    day: int
    activities: List[str]
    hospital: str
    pharmacy: str
    tip: str
    weather: str

    @classmethod
    def from_domain(cls, obj: ItineraryDay) -> "ItineraryDaySchema":
        return cls(
            day=obj.day,
            activities=list(obj.activities),
            hospital=obj.hospital,
            pharmacy=obj.pharmacy,
            tip=obj.tip,
            weather=obj.weather,
        )


class ItineraryMetaSchema(CamelModel):
    destination: str
    start_date: str
    end_date: str
    budget: float
    theme: str

    @classmethod
    def from_domain(cls, obj: ItineraryMeta) -> "ItineraryMetaSchema":
        return cls(
            destination=obj.destination,
            start_date=obj.start_date,
            end_date=obj.end_date,
            budget=obj.budget,
            theme=obj.theme,
        )


class ItineraryResponse(CamelModel):
    days: List[ItineraryDaySchema]
    meta: ItineraryMetaSchema
    degraded: bool = False

    @classmethod
    def from_domain(cls, obj: Itinerary) -> "ItineraryResponse":
        return cls(
            days=[ItineraryDaySchema.from_domain(d) for d in obj.days],
            meta=ItineraryMetaSchema.from_domain(obj.meta),
            degraded=obj.degraded,
        )


class BookingItemSchema(LaxRequestModel):
    day: str = ""
    activities: List[str] = Field(default_factory=list)

    @field_validator("day", mode="before")
    @classmethod
    def _day_label(cls, value: Any) -> str:
        return lax_str(value) or ""

    @field_validator("activities", mode="before")
    @classmethod
    def _activity_list(cls, value: Any) -> List[str]:
        return lax_str_list(value)


class TripDetailsSchema(LaxRequestModel):
    origin: str = ""
    destination: str = ""
    start_date: str = ""
    end_date: str = ""
    travelers: int = 1
    flight_class: str = "Economy"
    hotel_rating: int = 3

    @field_validator("origin", "destination", "start_date", "end_date", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return lax_str(value) or ""

    @field_validator("travelers", mode="before")
    @classmethod
    def _at_least_one_traveler(cls, value: Any) -> int:
        count = lax_int(value)
        return max(1, count) if count is not None else 1

    @field_validator("flight_class", mode="before")
    @classmethod
    def _flight_class(cls, value: Any) -> str:
        text = lax_str(value)
        return text.strip() if text and text.strip() else "Economy"

    @field_validator("hotel_rating", mode="before")
    @classmethod
    def _star_rating(cls, value: Any) -> int:
        stars = lax_int(value)
        return min(5, max(1, stars)) if stars is not None else 3

    def to_domain(self) -> TripDetails:
        return TripDetails(
            origin=self.origin,
            destination=self.destination,
            start_date=self.start_date,
            end_date=self.end_date,
            travelers=self.travelers,
            flight_class=self.flight_class,
            hotel_rating=self.hotel_rating,
        )

    @classmethod
    def from_domain(cls, obj: TripDetails) -> "TripDetailsSchema":
        return cls(
            origin=obj.origin,
            destination=obj.destination,
            start_date=obj.start_date,
            end_date=obj.end_date,
            travelers=obj.travelers,
            flight_class=obj.flight_class,
            hotel_rating=obj.hotel_rating,
        )


class BookRequest(LaxRequestModel):
    user_id: str = ""
    booking_items: List[BookingItemSchema] = Field(default_factory=list)
    details: TripDetailsSchema = Field(default_factory=TripDetailsSchema)

    @field_validator("user_id", mode="before")
    @classmethod
    def _user(cls, value: Any) -> str:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return lax_str(value) or ""

    @field_validator("booking_items", mode="before")
    @classmethod
    def _items(cls, value: Any) -> list:
        if not isinstance(value, (list, tuple)):
            return []
        return [item for item in value if isinstance(item, (dict, BookingItemSchema))]

    @field_validator("details", mode="before")
    @classmethod
    def _details(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, TripDetailsSchema)) else {}

    def to_domain(self) -> BookingRequest:
        return BookingRequest(
            user_id=self.user_id,
            details=self.details.to_domain(),
            items=tuple(
                BookingItem(day=item.day, activities=tuple(item.activities))
                for item in self.booking_items
            ),
        )


class FlightLegSchema(CamelModel):
    vendor: str
    route: str
    flight_class: str = Field(alias="class")
    price: float
    date: str

    @classmethod
    def from_domain(cls, obj: FlightLeg) -> "FlightLegSchema":
        return cls(
            vendor=obj.vendor,
            route=obj.route,
            flight_class=obj.flight_class,
            price=obj.price,
            date=obj.date,
        )


class HotelStaySchema(CamelModel):
    name: str
    check_in: str
    check_out: str
    rating: int
    price_per_night: float
    nights: int

    @classmethod
    def from_domain(cls, obj: HotelStay) -> "HotelStaySchema":
        return cls(
            name=obj.name,
            check_in=obj.check_in,
            check_out=obj.check_out,
            rating=obj.rating,
            price_per_night=obj.price_per_night,
            nights=obj.nights,
        )


class TransferSchema(CamelModel):
    type: str
    vendor: str
    date: str
    price: float

    @classmethod
    def from_domain(cls, obj: Transfer) -> "TransferSchema":
        return cls(type=obj.type, vendor=obj.vendor, date=obj.date, price=obj.price)


class BookingTotalsSchema(CamelModel):
    flights: float
    hotel: float
    transport: float
    activities: float
    grand_total: float


class OrderSchema(CamelModel):
    order_id: str
    amount: float
    status: OrderStatus


class BookingResponse(CamelModel):
    booking_id: str
    details: TripDetailsSchema
    flights: List[FlightLegSchema]
    hotel: HotelStaySchema
    transport: List[TransferSchema]
    totals: BookingTotalsSchema
    order: OrderSchema
    simulated: bool = False

    @classmethod
    def from_domain(cls, obj: Booking) -> "BookingResponse":
        return cls(
            booking_id=obj.booking_id,
            details=TripDetailsSchema.from_domain(obj.details),
            flights=[FlightLegSchema.from_domain(f) for f in obj.flights],
            hotel=HotelStaySchema.from_domain(obj.hotel),
            transport=[TransferSchema.from_domain(t) for t in obj.transport],
            totals=BookingTotalsSchema(
                flights=obj.totals.flights,
                hotel=obj.totals.hotel,
                transport=obj.totals.transport,
                activities=obj.totals.activities,
                grand_total=obj.totals.grand_total,
            ),
            order=OrderSchema(
                order_id=obj.order.order_id,
                amount=obj.order.amount,
                status=obj.order.status,
            ),
            simulated=obj.simulated,
        )


class PointOfInterestSchema(CamelModel):
    place_id: str
    name: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    formatted_address: Optional[str] = None
    rating: Optional[float] = None
    types: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, obj: PointOfInterest) -> "PointOfInterestSchema":
        return cls(
            place_id=obj.place_id,
            name=obj.name,
            lat=obj.lat,
            lng=obj.lng,
            formatted_address=obj.formatted_address,
            rating=obj.rating,
            types=list(obj.types),
        )


class PoiResponse(CamelModel):
    pois: List[PointOfInterestSchema]
