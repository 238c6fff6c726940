# teaching_app/schemas/common.py
"""Shared response schemas - errors and raw write results"""

from pydantic import BaseModel, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from typing import Optional


class ErrorResponse(BaseModel):
    """Body returned for every failed request"""
    error: bool = Field(True, description="Always true for error bodies")
    message: str = Field(..., description="Human readable reason")


class MessageResponse(BaseModel):
    """Informational 200 response for business non-events"""
    message: str = Field(..., description="Status message")


class InsertResult(BaseModel):
    """Outcome of an insert_one call"""
    acknowledged: bool
    insertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResult":
        inserted_id = result.inserted_id
        return cls(
            acknowledged=result.acknowledged,
            insertedId=str(inserted_id) if inserted_id is not None else None,
        )


class UpdateWriteResult(BaseModel):
    """Outcome of an update_one call"""
    acknowledged: bool
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateWriteResult":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedId=str(upserted_id) if upserted_id is not None else None,
        )


class DeleteWriteResult(BaseModel):
    """Outcome of a delete_one call"""
    acknowledged: bool
    deletedCount: int = 0

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteWriteResult":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    timestamp: str = Field(..., description="Server time (UTC, ISO 8601)")
    version: str = Field(..., description="API version")
