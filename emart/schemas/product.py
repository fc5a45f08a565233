"""
Product API schemas.
Products and reviews are free-form documents; only the review list is typed.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class CreateProductRequest(BaseModel):
    """Request schema for creating a product. Any extra fields are stored as sent."""
    model_config = ConfigDict(extra="allow")

    reviews: List[Dict[str, Any]] = Field(default_factory=list, description="Product reviews")


class ReviewRequest(BaseModel):
    """A review appended to a product's ``reviews`` list, stored as sent."""
    model_config = ConfigDict(extra="allow")
