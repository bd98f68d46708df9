from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Tuple


class OrderStatus(str, Enum):
    confirmed = "CONFIRMED"
    pending = "PENDING"
    failed = "FAILED"


@dataclass(frozen=True)
class TripRequest:
    destination: str
    start_date: date
    end_date: date
    budget: float
    theme: str
    interests: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ForecastDay:
    date: str
    description: str
    temperature: str


@dataclass
class ItineraryDay:
    day: int
    activities: List[str]
    hospital: str
    pharmacy: str
    tip: str
    weather: str


@dataclass
class ItineraryMeta:
    destination: str
    start_date: str
    end_date: str
    budget: float
    theme: str


@dataclass
class Itinerary:
    days: List[ItineraryDay]
    meta: ItineraryMeta
    degraded: bool = False


@dataclass(frozen=True)
class BookingItem:
    day: str
    activities: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TripDetails:
    origin: str
    destination: str
    start_date: str
    end_date: str
    travelers: int = 1
    flight_class: str = "Economy"
    hotel_rating: int = 3


@dataclass(frozen=True)
class BookingRequest:
    user_id: str
    details: TripDetails
    items: Tuple[BookingItem, ...] = ()


@dataclass
class FlightLeg:
    vendor: str
    route: str
    flight_class: str
    price: float
    date: str


@dataclass
class HotelStay:
    name: str
    check_in: str
    check_out: str
    rating: int
    price_per_night: float
    nights: int


@dataclass
class Transfer:
    type: str
    vendor: str
    date: str
    price: float


@dataclass
class BookingTotals:
    flights: float
    hotel: float
    transport: float
    activities: float

    @property
    def grand_total(self) -> float:
        return self.flights + self.hotel + self.transport + self.activities


@dataclass
class Order:
    order_id: str
    amount: float
    status: OrderStatus


@dataclass
class Booking:
    booking_id: str
    details: TripDetails
    hotel: HotelStay
    totals: BookingTotals
    order: Order
    flights: List[FlightLeg] = field(default_factory=list)
    transport: List[Transfer] = field(default_factory=list)
    simulated: bool = False
