"""
Common schemas used across the API.
Write results mirror the shape of the MongoDB driver's result objects.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from ..utils.serializers import object_id_or_none


class CamelModel(BaseModel):
    """Base for bodies whose keys are camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RootResponse(BaseModel):
    """Response schema for root endpoint."""
    message: str = Field(..., description="Welcome message")
    status: str = Field(..., description="Application status")


class HealthCheckResponse(BaseModel):
    """Response schema for health check endpoint."""
    status: str = Field(..., description="Application health status")
    database: str = Field(..., description="Database connection status")
    version: str = Field(..., description="Application version")


class InsertResultResponse(CamelModel):
    """Outcome of a single-document insert."""
    acknowledged: bool = Field(..., description="Whether the write was acknowledged")
    inserted_id: str = Field(..., description="Identifier of the new document")

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResultResponse":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateResultResponse(CamelModel):
    """Outcome of a single-document update; ``matched_count`` is 0 when nothing matched."""
    acknowledged: bool
    matched_count: int
    modified_count: int
    upserted_id: Optional[str] = None
    upserted_count: int = 0

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateResultResponse":
        upserted_id = object_id_or_none(result.upserted_id)
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=upserted_id,
            upserted_count=0 if upserted_id is None else 1,
        )


class DeleteResultResponse(CamelModel):
    """Outcome of a single-document delete; ``deleted_count`` is 0 when nothing matched."""
    acknowledged: bool
    deleted_count: int

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteResultResponse":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
