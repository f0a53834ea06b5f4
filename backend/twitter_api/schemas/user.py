"""
Twitter API — User Schemas
============================

UserResponse deliberately has no password field: the stored hash never
leaves the service, including in the sign-up response.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    id: str = Field(description="User identifier (UUID)")
    name: str
    email: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class CreateUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateUserRequest(BaseModel):
    """At least one of name/email must be non-empty."""
    name: Optional[str] = None
    email: Optional[str] = None


class BatchUserItem(BaseModel):
    id: str = Field(description="Target user id")
    name: Optional[str] = None
    email: Optional[str] = None


class BatchUpdateUsersRequest(BaseModel):
    users: List[BatchUserItem] = Field(
        default_factory=list,
        description="Updates applied one by one; a failure does not undo the others",
    )


class BatchFailureItem(BaseModel):
    id: str
    reason: str


class BatchUpdateResponse(BaseModel):
    message: str
    updated: List[str] = Field(description="Ids that were updated and committed")
    failed: List[BatchFailureItem] = Field(description="Ids that were skipped, with the reason")
