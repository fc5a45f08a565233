"""
FastAPI dependencies and common validations shared by the route modules
"""
import logging

from bson import ObjectId
from fastapi import HTTPException, Request

from ..config.settings import Settings
from ..services.payments import PaymentGateway

logger = logging.getLogger(__name__)


def validate_object_id(object_id: str, resource_name: str = "resource") -> ObjectId:
    """
    Validate and convert string to ObjectId

    Args:
        object_id: String representation of ObjectId
        resource_name: Name of the resource for error messages

    Returns:
        Valid ObjectId instance

    Raises:
        HTTPException: If ObjectId format is invalid
    """
    if not ObjectId.is_valid(object_id):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {resource_name} ID format: {object_id}"
        )
    return ObjectId(object_id)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with"""
    return request.app.state.settings


def get_payment_gateway(request: Request) -> PaymentGateway:
    """Payment gateway the running application was built with"""
    return request.app.state.payment_gateway


def server_error(error: Exception, action: str) -> HTTPException:
    """Log an unexpected driver failure and wrap it as a 500 response"""
    logger.error(f"❌ Failed to {action}: {error}")
    return HTTPException(status_code=500, detail=str(error))
