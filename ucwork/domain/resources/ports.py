"""
Port interfaces (ABCs) for the two persistence stores.

Infrastructure adapters implement these interfaces. Handlers only
ever see the ports, so tests can substitute in-memory doubles.
Adapters must wrap backend failures in StoreError.
"""

from abc import ABC, abstractmethod

from ucwork.domain.resources.entities import Member, Order


class MemberStore(ABC):
    """Port for listing and adding members."""

    @abstractmethod
    def list_members(self) -> list[Member]:
        """Return every stored member.

        Raises:
            StoreError: If the backing store cannot be read.
        """
        raise NotImplementedError

    @abstractmethod
    def add_member(self, member: Member) -> int:
        """Persist a member and return its generated identity.

        Raises:
            StoreError: If the backing store rejects the write.
        """
        raise NotImplementedError


class OrderStore(ABC):
    """Port for listing and adding orders."""

    @abstractmethod
    def list_orders(self) -> list[Order]:
        """Return every stored order.

        Raises:
            StoreError: If the backing store cannot be read.
        """
        raise NotImplementedError

    @abstractmethod
    def add_order(self, order: Order) -> int:
        """Persist an order and return its generated identity.

        Raises:
            StoreError: If the backing store rejects the write.
        """
        raise NotImplementedError
