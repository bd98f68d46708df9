import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

ORDERS_URL = "https://api.razorpay.com/v1/orders"


class PaymentTool:
    """Razorpay order creation. Amounts are passed in rupees and sent in paise."""

    def __init__(
        self,
        key_id: Optional[str],
        key_secret: Optional[str],
        url: str = ORDERS_URL,
        currency: str = "INR",
        timeout: float = 10.0,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.url = url
        self.currency = currency
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.key_id and self.key_secret)

    def create_order(self, amount: float, receipt: str) -> dict:
        if not self.configured:
            raise RuntimeError("Payment gateway credentials are not configured")
        resp = requests.post(
            self.url,
            json={"amount": int(round(amount * 100)), "currency": self.currency, "receipt": receipt},
            auth=(self.key_id, self.key_secret),
            timeout=self.timeout,
        )
        resp.raise_for_status()
        order = resp.json()
        logger.info("Created payment order %s for receipt %s", order.get("id"), receipt)
        return order
