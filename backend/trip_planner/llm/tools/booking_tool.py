from __future__ import annotations

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class BookingBackendUnavailable(RuntimeError):
    pass


class BookingBackendTool:
    """
    Quote/confirm client for the travel booking partner API.
    Errors are raised to the caller, which decides whether to synthesize.
    """

    def __init__(self, base_url: Optional[str], api_key: Optional[str], timeout: float = 10.0):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.api_key = api_key
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.base_url and self.api_key)

    def quote(self, item: dict) -> dict:
        return self._post("/quote", item)

    def confirm(self, quote_id: str, passenger: dict) -> dict:
        return self._post("/confirm", {"quoteId": quote_id, "passenger": passenger})

    def _post(self, path: str, payload: dict) -> dict:
        if not self.configured:
            raise BookingBackendUnavailable("Booking backend is not configured")
        resp = requests.post(
            f"{self.base_url}{path}",
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()
        logger.debug("Booking backend %s -> %s", path, data)
        return data
