"""
Stripe payment adapter.
Creates card payment intents and hands their client secret back to the caller;
confirmation of the intent happens between the client and Stripe.
"""
import logging
from decimal import ROUND_DOWN, Decimal
from typing import Sequence, Union

import stripe
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


def to_minor_units(total: Union[int, float, str, Decimal]) -> int:
    """Convert a major-unit amount (dollars) to integer cents, truncating toward zero."""
    cents = Decimal(str(total)) * 100
    return int(cents.to_integral_value(rounding=ROUND_DOWN))


class PaymentGateway:
    """Thin wrapper around ``stripe.PaymentIntent``."""

    def __init__(
        self,
        api_key: str,
        currency: str = "usd",
        payment_method_types: Sequence[str] = ("card",),
    ):
        self.api_key = api_key
        self.currency = currency
        self.payment_method_types = list(payment_method_types)

    async def create_payment_intent(self, amount: int) -> str:
        """Create a payment intent for ``amount`` minor units and return its client secret."""
        intent = await run_in_threadpool(
            stripe.PaymentIntent.create,
            api_key=self.api_key,
            amount=amount,
            currency=self.currency,
            payment_method_types=self.payment_method_types,
        )
        logger.info(f"💳 Created payment intent {intent['id']} for {amount} {self.currency}")
        return intent["client_secret"]
