"""
Shared fixtures: in-memory store doubles and a wired test client.

The doubles record every call so tests can assert on store traffic,
and can be told to fail with a StoreError.
"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from ucwork.core.config import Settings
from ucwork.domain.resources.entities import Member, Order
from ucwork.domain.resources.errors import StoreError
from ucwork.domain.resources.ports import MemberStore, OrderStore
from ucwork.main import create_app


class FakeMemberStore(MemberStore):
    """MemberStore double keeping members in a list."""

    def __init__(self, members: Optional[list[Member]] = None) -> None:
        self.members = list(members or [])
        self.added: list[Member] = []
        self.list_calls = 0
        self.fail_with: Optional[StoreError] = None
        self._next_id = 100

    def list_members(self) -> list[Member]:
        self.list_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.members)

    def add_member(self, member: Member) -> int:
        if self.fail_with is not None:
            raise self.fail_with
        self._next_id += 1
        self.added.append(member)
        self.members.append(Member(name=member.name, id=self._next_id))
        return self._next_id


class FakeOrderStore(OrderStore):
    """OrderStore double keeping orders in a list."""

    def __init__(self, orders: Optional[list[Order]] = None) -> None:
        self.orders = list(orders or [])
        self.added: list[Order] = []
        self.list_calls = 0
        self.fail_with: Optional[StoreError] = None
        self._next_id = 0

    def list_orders(self) -> list[Order]:
        self.list_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.orders)

    def add_order(self, order: Order) -> int:
        if self.fail_with is not None:
            raise self.fail_with
        self._next_id += 1
        self.added.append(order)
        self.orders.append(Order(name=order.name, id=self._next_id))
        return self._next_id


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        rate_limit_enabled=False,
        log_level="DEBUG",
    )


@pytest.fixture
def member_store() -> FakeMemberStore:
    return FakeMemberStore()


@pytest.fixture
def order_store() -> FakeOrderStore:
    return FakeOrderStore()


@pytest.fixture
def client(member_store, order_store, settings) -> TestClient:
    app = create_app(member_store=member_store, order_store=order_store, settings=settings)
    return TestClient(app)
