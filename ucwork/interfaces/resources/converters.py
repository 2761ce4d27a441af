"""
Request-to-entity converters.

The convert stage of every create handler goes through a Converter so
that per-resource validation or mapping can be added without touching
the handler pipeline. Both converters are currently field-for-field
copies.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from ucwork.domain.resources.entities import Member, Order
from ucwork.interfaces.resources.schemas import MemberRequest, OrderRequest


class Converter(ABC):
    """Maps a decoded request value onto a domain entity."""

    @abstractmethod
    def convert(self, request: BaseModel) -> object:
        """Return the domain entity for ``request``.

        Raises:
            ConversionError: If the request cannot be mapped.
        """
        raise NotImplementedError


class MemberConverter(Converter):
    def convert(self, request: MemberRequest) -> Member:
        return Member(name=request.name)


class OrderConverter(Converter):
    def convert(self, request: OrderRequest) -> Order:
        return Order(name=request.name)
