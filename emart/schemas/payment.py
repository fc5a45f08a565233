"""
Payment API schemas.
"""
from pydantic import ConfigDict, Field

from .common import CamelModel


class PaymentIntentRequest(CamelModel):
    """Checkout booking; only the total is read, the rest is passed along untouched."""
    model_config = ConfigDict(extra="allow")

    total_amount: float = Field(..., allow_inf_nan=False, description="Order total in dollars")


class PaymentIntentResponse(CamelModel):
    client_secret: str
