"""
Twitter API — Comment Schemas
===============================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CommentResponse(BaseModel):
    id: str = Field(description="Comment identifier (UUID)")
    content: str
    post_id: str = Field(alias="postId", description="Parent post id")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class CommentBody(BaseModel):
    content: Optional[str] = Field(default=None, examples=["Nice post!"])
