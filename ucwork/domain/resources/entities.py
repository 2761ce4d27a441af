"""
Domain entities for members and orders.

Entities carry no framework imports and no IO operations.
Identity is assigned by the owning store on creation, so a freshly
decoded entity has ``id=None``.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Member:
    """A registered member."""

    name: str
    id: Optional[int] = None


@dataclass(frozen=True)
class Order:
    """A placed order."""

    name: str
    id: Optional[int] = None
