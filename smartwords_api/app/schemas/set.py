"""
Pydantic schemas for study sets.

``SetCreate`` describes the request body for creating a set; it only
checks types, length rules are enforced by ``SetRecord``.  ``SetRead``
is the response shape and uses the ``_id``/``createdAt`` field names
the browser client expects.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from smartwords_api.app.records.sets import SetRecord


class WordCreate(BaseModel):
    word: str = Field(..., examples=["test"])
    meaning: str = Field(..., examples=["A trial or experiment"])


class SetCreate(BaseModel):
    """Schema for creating a set."""

    name: str = Field(..., examples=["Test Set"])
    description: str = Field(..., examples=["A test set"])
    words: List[WordCreate] = Field(default_factory=list)


class WordRead(BaseModel):
    id: str = Field(..., alias="_id")
    word: str
    meaning: str

    model_config = {
        "populate_by_name": True,
    }


class SetRead(BaseModel):
    """Schema for reading a set from the API."""

    id: str = Field(..., alias="_id")
    name: str
    description: str
    words: List[WordRead]
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_record(cls, record: SetRecord) -> "SetRead":
        return cls.model_validate(record.to_document())
