# Routes package init
"""
Twitter API — API Routes Package
==================================

What:  HTTP route handlers (the controller layer).

Route Inventory:
    - auth.py:      POST /signup, POST /signin                  (public)
    - users.py:     /users, /users/{id}                          (bearer)
    - posts.py:     /posts, /posts/{id}, /users/{id}/post, ...   (bearer)
    - comments.py:  /posts/{id}/comments, /posts/{id}/comment/.. (bearer)
    - health.py:    GET /health                                  (public)

Design Principle:
    Routes are THIN: parse the body into a DTO, call one service method,
    wrap the returned entity in a response schema. Errors are raised by the
    services and rendered by the handlers registered in main.py.
"""
