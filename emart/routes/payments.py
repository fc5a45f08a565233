"""
Payment routes.
"""
import logging
from typing import Any, Dict

import stripe
from fastapi import APIRouter, Depends, HTTPException

from ..auth.middleware import verify_token
from ..schemas.payment import PaymentIntentRequest, PaymentIntentResponse
from ..services.payments import PaymentGateway, to_minor_units
from ..utils.dependencies import get_payment_gateway

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    booking: PaymentIntentRequest,
    decoded: Dict[str, Any] = Depends(verify_token),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    amount = to_minor_units(booking.total_amount)
    logger.info(f"💳 Payment intent requested by {decoded.get('email')} for {amount} minor units")

    try:
        client_secret = await gateway.create_payment_intent(amount)
    except stripe.StripeError as e:
        logger.error(f"❌ Stripe rejected payment intent: {e}")
        raise HTTPException(status_code=502, detail=e.user_message or str(e))

    return PaymentIntentResponse(client_secret=client_secret)
