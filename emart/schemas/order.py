"""
Shipment/order API schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateShipmentRequest(BaseModel):
    """Shipping and payment details submitted at checkout, stored as sent."""
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = Field(None, description="Email of the ordering user")
