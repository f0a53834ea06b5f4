# Services package init
"""
Twitter API — Services Layer
==============================

What:  Business logic between routes (HTTP) and repositories (storage).
How:   Services receive repository contracts and security helpers in their
       constructors; twitter_api.dependencies builds one set per request.

Service Inventory:
    - AuthService:    sign-up, sign-in (token issuance)
    - UserService:    user CRUD and the non-atomic batch update
    - PostService:    post CRUD with user/post existence and ownership checks
    - CommentService: comment CRUD scoped to an existing post

Services raise exceptions from twitter_api.exceptions and never build HTTP
responses themselves.
"""

from twitter_api.services.auth_service import AuthService
from twitter_api.services.comment_service import CommentService
from twitter_api.services.post_service import PostService
from twitter_api.services.user_service import UserService

__all__ = ["AuthService", "UserService", "PostService", "CommentService"]
