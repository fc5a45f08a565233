"""
Schemas package for API request/response validation.
These models define the structure of data sent to and from the API endpoints.
"""

# Common schemas
from .common import (
    CamelModel,
    DeleteResultResponse,
    HealthCheckResponse,
    InsertResultResponse,
    RootResponse,
    UpdateResultResponse,
)

# Product schemas
from .product import CreateProductRequest, ReviewRequest

# User schemas
from .user import (
    AdminStatusResponse,
    CreateUserRequest,
    TokenResponse,
    VendorStatusResponse,
)

# Order schemas
from .order import CreateShipmentRequest

# Payment schemas
from .payment import PaymentIntentRequest, PaymentIntentResponse

__all__ = [
    # Common schemas
    "CamelModel",
    "DeleteResultResponse",
    "HealthCheckResponse",
    "InsertResultResponse",
    "RootResponse",
    "UpdateResultResponse",

    # Product schemas
    "CreateProductRequest",
    "ReviewRequest",

    # User schemas
    "AdminStatusResponse",
    "CreateUserRequest",
    "TokenResponse",
    "VendorStatusResponse",

    # Order schemas
    "CreateShipmentRequest",

    # Payment schemas
    "PaymentIntentRequest",
    "PaymentIntentResponse",
]
