"""Stripe payment intents over the REST API"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class PaymentGatewayError(Exception):
    """Raised when Stripe rejects a request or cannot be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def to_minor_units(price: float) -> int:
    """Convert a price to integer cents, truncating like the checkout client"""
    return int(price * 100)


class PaymentGateway:
    """Thin adapter around Stripe's ``/payment_intents`` endpoint"""

    def __init__(self, http_client: httpx.AsyncClient, secret_key: str, api_url: str):
        self.http_client = http_client
        self.secret_key = secret_key
        self.api_url = api_url.rstrip("/")

    async def create_payment_intent(self, amount: int, currency: str = "usd") -> str:
        """Create a card-only payment intent and return its client secret

        Args:
            amount: Amount in the smallest currency unit (cents)
            currency: Three-letter ISO currency code

        Returns:
            The intent's ``client_secret`` for client-side confirmation
        """
        try:
            response = await self.http_client.post(
                f"{self.api_url}/payment_intents",
                data={
                    "amount": amount,
                    "currency": currency,
                    "payment_method_types[]": "card",
                },
                headers={"Authorization": f"Bearer {self.secret_key}"},
            )
        except httpx.HTTPError as e:
            logger.error(f"❌ Stripe API unreachable: {e}")
            raise PaymentGatewayError("Payment gateway unreachable") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.is_error:
            message = payload.get("error", {}).get("message", "Payment intent creation failed")
            logger.error(f"❌ Stripe API error ({response.status_code}): {message}")
            raise PaymentGatewayError(message, status_code=response.status_code)

        client_secret = payload.get("client_secret")
        if not client_secret:
            raise PaymentGatewayError("Payment intent has no client secret", status_code=response.status_code)

        logger.info(f"✓ Payment intent created: {payload.get('id')} ({amount} {currency})")
        return client_secret

    async def aclose(self) -> None:
        await self.http_client.aclose()
