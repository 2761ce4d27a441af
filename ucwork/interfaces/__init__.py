"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas
and the fallible handlers behind each route.
"""
