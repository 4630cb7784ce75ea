"""
Acknowledgment shapes returned for write operations.

These mirror the storage driver's result objects so that clients see
the same ``insertedId``/``matchedCount``/``deletedCount`` fields they
would get from the database itself.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class InsertAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    inserted_id: str = Field(alias="insertedId")

    @classmethod
    def from_result(cls, result: Any) -> "InsertAck":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")

    @classmethod
    def from_result(cls, result: Any) -> "UpdateAck":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=None if upserted_id is None else str(upserted_id),
        )


class DeleteAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    deleted_count: int = Field(alias="deletedCount")

    @classmethod
    def from_result(cls, result: Any) -> "DeleteAck":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


class MessageResponse(BaseModel):
    """Informational message, used for outcomes that are not errors."""

    message: str
