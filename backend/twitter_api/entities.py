"""
Twitter API — Entity Records
==============================

What:  Plain, immutable records handed from repositories to services.
Why:   Services never see ORM instances, so they cannot lazy-load, mutate
       tracked state, or depend on which storage backend is in use.
How:   Repositories build these from ORM rows with small conversion
       helpers; routes turn them into pydantic response schemas.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    description: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Comment:
    id: str
    content: str
    post_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class UserChanges:
    """One element of a batch update: the target id plus the new values."""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
