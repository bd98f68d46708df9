import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import requests

logger = logging.getLogger(__name__)

TEXT_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
DEFAULT_CATEGORIES = ("heritage", "food", "nightlife")


@dataclass
class PointOfInterest:
    place_id: str
    name: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    formatted_address: Optional[str] = None
    rating: Optional[float] = None
    types: List[str] = field(default_factory=list)


class PlacesTool:
    """Google Places text search, one query per category."""

    def __init__(
        self,
        api_key: Optional[str],
        url: str = TEXT_SEARCH_URL,
        region: str = "in",
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.url = url
        self.region = region
        self.timeout = timeout

    def search_pois(
        self,
        city: str,
        categories: Sequence[str] = DEFAULT_CATEGORIES,
        limit: int = 6,
    ) -> List[PointOfInterest]:
        if not self.api_key:
            logger.info("Maps API key not configured, skipping POI search")
            return []
        results: List[PointOfInterest] = []
        for category in categories:
            try:
                resp = requests.get(
                    self.url,
                    params={"query": f"{city} {category}", "key": self.api_key, "region": self.region},
                    timeout=self.timeout,
                )
                resp.raise_for_status()
            except Exception as exc:  # noqa: BLE001
                logger.warning("Places search failed for %s/%s: %s", city, category, exc)
                continue
            for place in resp.json().get("results", [])[:limit]:
                location = place.get("geometry", {}).get("location", {})
                results.append(
                    PointOfInterest(
                        place_id=place.get("place_id", ""),
                        name=place.get("name", "Unknown place"),
                        lat=location.get("lat"),
                        lng=location.get("lng"),
                        formatted_address=place.get("formatted_address"),
                        rating=place.get("rating"),
                        types=list(place.get("types", [])),
                    )
                )
        return results
