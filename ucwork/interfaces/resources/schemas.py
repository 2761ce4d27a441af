"""
Pydantic schemas for the members and orders API.

Request schemas are the decode targets of the create handlers: a JSON
object whose ``name`` reads as an empty string when absent or null.
Unknown fields are ignored. Resource schemas define the JSON written back to
clients.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ucwork.domain.resources.entities import Member, Order


class NamedRequest(BaseModel):
    """Body carrying a single ``name``."""

    name: str = Field(default="", description="Display name")

    @field_validator("name", mode="before")
    @classmethod
    def null_name_is_empty(cls, value: object) -> object:
        return "" if value is None else value


class MemberRequest(NamedRequest):
    """Request body for POST /members."""


class OrderRequest(NamedRequest):
    """Request body for POST /orders."""


class MemberResource(BaseModel):
    """A member as returned by the API."""

    name: str
    id: Optional[int] = None

    @classmethod
    def from_entity(cls, member: Member) -> "MemberResource":
        return cls(name=member.name, id=member.id)


class OrderResource(BaseModel):
    """An order as returned by the API."""

    name: str
    id: Optional[int] = None

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResource":
        return cls(name=order.name, id=order.id)


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
