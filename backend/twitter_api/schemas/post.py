"""
Twitter API — Post Schemas
============================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PostResponse(BaseModel):
    id: str = Field(description="Post identifier (UUID)")
    title: str
    description: str
    user_id: str = Field(alias="userId", description="Author's user id")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class PostBody(BaseModel):
    """Used for both create and update; both fields are required."""
    title: Optional[str] = Field(default=None, examples=["Hello"])
    description: Optional[str] = Field(default=None, examples=["My first post"])
