from __future__ import annotations

import logging
from typing import List, Optional

import requests

from trip_planner.models.domain import ForecastDay

logger = logging.getLogger(__name__)

GEO_URL = "http://api.openweathermap.org/geo/1.0/direct"
FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"


class WeatherTool:
    """
    OpenWeatherMap lookup: geocode a place name, then summarise the first few
    forecast slots. Every failure yields an empty forecast.
    """

    def __init__(
        self,
        api_key: Optional[str],
        geo_url: str = GEO_URL,
        forecast_url: str = FORECAST_URL,
        timeout: float = 10.0,
        slots: int = 3,
    ):
        self.api_key = api_key
        self.geo_url = geo_url
        self.forecast_url = forecast_url
        self.timeout = timeout
        self.slots = slots

    def forecast(self, destination: str) -> List[ForecastDay]:
        if not self.api_key:
            logger.info("Weather API key not configured, skipping forecast")
            return []
        try:
            coords = self._geocode(destination)
            if coords is None:
                logger.info("No geocoding match for %r", destination)
                return []
            return self._fetch_forecast(*coords)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Weather lookup failed for %r: %s", destination, exc)
            return []

    def _geocode(self, destination: str) -> Optional[tuple[float, float]]:
        resp = requests.get(
            self.geo_url,
            params={"q": destination, "limit": 1, "appid": self.api_key},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        matches = resp.json()
        if not matches:
            return None
        return float(matches[0]["lat"]), float(matches[0]["lon"])

    def _fetch_forecast(self, lat: float, lon: float) -> List[ForecastDay]:
        resp = requests.get(
            self.forecast_url,
            params={"lat": lat, "lon": lon, "appid": self.api_key, "units": "metric"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        entries = resp.json().get("list", [])[: self.slots]
        return [
            ForecastDay(
                date=entry["dt_txt"],
                description=entry["weather"][0]["description"],
                temperature=f"{entry['main']['temp']}°C",
            )
            for entry in entries
        ]
