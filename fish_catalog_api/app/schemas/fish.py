"""
Pydantic schemas for fish records.

A fish has no required fields: a client may create an entirely empty
record and the server still assigns it an identifier.  Empty strings
and zero lengths are treated the same as absent values, and absent
values are omitted when a record is serialized.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FishCreate(BaseModel):
    """Schema for creating a new fish.

    Any ``id`` (or other unknown key) supplied by the client is
    ignored; identifiers are always assigned by the store.  Values
    are not coerced: ``"90"``, ``90.0`` and ``true`` are all rejected
    for ``max_length``.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    name: Optional[str] = Field(None, description="Common name of the fish")
    environment: Optional[str] = Field(None, description="Habitat, e.g. river, reef, lake")
    max_length: Optional[int] = Field(None, description="Maximum recorded length")

    @field_validator("name", "environment", "max_length")
    @classmethod
    def blank_to_none(cls, v):
        # "" and 0 are indistinguishable from "not provided" on the wire
        if not v:
            return None
        return v


class FishRead(BaseModel):
    """Schema for reading a stored fish.  Instances are immutable."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None
    environment: Optional[str] = None
    max_length: Optional[int] = None
