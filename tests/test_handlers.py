"""
Tests for the member and order fallible handlers.

Handlers are called directly with a ResponseWriter and a HandlerRequest;
stores are the in-memory doubles from conftest.
"""

import json

import pytest

from ucwork.domain.resources.entities import Member, Order
from ucwork.domain.resources.errors import (
    BusinessRuleRejection,
    ConversionError,
    DecodeError,
    EncodeError,
    StoreError,
)
from ucwork.interfaces.resources.converters import Converter, MemberConverter, OrderConverter
from ucwork.interfaces.resources.handlers import MemberHandlers, OrderHandlers
from ucwork.interfaces.resources.schemas import MemberRequest, OrderRequest
from ucwork.shared.dispatch import HandlerRequest, ResponseWriter

from tests.conftest import FakeMemberStore, FakeOrderStore


def _request(body: bytes = b"", **path_params: str) -> HandlerRequest:
    return HandlerRequest(method="POST", path="/", path_params=path_params, body=body)


class RejectingConverter(Converter):
    def convert(self, request):
        raise ConversionError("name must not be empty")


class TestConverters:
    """Tests for the per-resource converters."""

    def test_member_converter_copies_name(self) -> None:
        assert MemberConverter().convert(MemberRequest(name="Alice")) == Member(name="Alice")

    def test_order_converter_copies_name(self) -> None:
        assert OrderConverter().convert(OrderRequest(name="Tea")) == Order(name="Tea")


class TestListMembers:
    """Tests for MemberHandlers.list_members."""

    def test_writes_all_members_as_json(self) -> None:
        store = FakeMemberStore([Member(name="Alice", id=1), Member(name="Bob", id=2)])
        writer = ResponseWriter()

        assert MemberHandlers(store).list_members(writer, _request()) is None
        assert writer.status_code == 200
        assert writer.headers["Content-Type"] == "application/json"
        assert json.loads(writer.body) == [
            {"name": "Alice", "id": 1},
            {"name": "Bob", "id": 2},
        ]

    def test_store_failure_returns_500_envelope(self) -> None:
        store = FakeMemberStore()
        store.fail_with = StoreError("datastore unavailable")

        error = MemberHandlers(store).list_members(ResponseWriter(), _request())

        assert error is not None
        assert error.status == 500
        assert error.message == "datastore unavailable"
        assert error.cause is store.fail_with


class TestCreateMember:
    """Tests for MemberHandlers.create_member."""

    def test_persists_once_and_answers_201(self) -> None:
        store = FakeMemberStore()
        writer = ResponseWriter()

        error = MemberHandlers(store).create_member(writer, _request(b'{"name": "Alice"}'))

        assert error is None
        assert store.added == [Member(name="Alice")]
        assert writer.status_code == 201
        assert writer.headers["Location"] == "/members/101"
        assert json.loads(writer.body) == {"name": "Alice", "id": 101}

    def test_missing_name_defaults_to_empty(self) -> None:
        store = FakeMemberStore()
        assert MemberHandlers(store).create_member(ResponseWriter(), _request(b"{}")) is None
        assert store.added == [Member(name="")]

    def test_null_name_reads_as_empty(self) -> None:
        store = FakeMemberStore()
        writer = ResponseWriter()

        assert MemberHandlers(store).create_member(writer, _request(b'{"name": null}')) is None
        assert store.added == [Member(name="")]
        assert json.loads(writer.body) == {"name": "", "id": 101}

    @pytest.mark.parametrize("body", [b"", b"{", b"[]", b'{"name": 5}', b"null"])
    def test_malformed_body_is_a_decode_error(self, body) -> None:
        store = FakeMemberStore()

        error = MemberHandlers(store).create_member(ResponseWriter(), _request(body))

        assert error is not None
        assert error.status == 400
        assert error.message.startswith("decode error: ")
        assert isinstance(error.cause, DecodeError)
        assert store.added == []

    def test_conversion_failure_skips_store(self) -> None:
        store = FakeMemberStore()
        handlers = MemberHandlers(store, converter=RejectingConverter())

        error = handlers.create_member(ResponseWriter(), _request(b'{"name": ""}'))

        assert error is not None
        assert error.status == 422
        assert error.message == "convert error: name must not be empty"
        assert store.added == []

    def test_store_failure_is_add_db_error(self) -> None:
        store = FakeMemberStore()
        store.fail_with = StoreError("quota exceeded")
        writer = ResponseWriter()

        error = MemberHandlers(store).create_member(writer, _request(b'{"name": "Alice"}'))

        assert error is not None
        assert error.status == 500
        assert error.message == "add db error: quota exceeded"
        assert writer.body == b""

    def test_encode_failure_keeps_the_stored_member(self, monkeypatch) -> None:
        store = FakeMemberStore()

        def failing_encode(adapter, value):
            raise EncodeError("cannot encode")

        monkeypatch.setattr("ucwork.interfaces.resources.handlers._encode", failing_encode)

        error = MemberHandlers(store).create_member(ResponseWriter(), _request(b'{"name": "Alice"}'))

        assert error is not None
        assert error.status == 500
        assert error.message == "cannot encode"
        assert store.added == [Member(name="Alice")]


class TestUpdateMember:
    """Tests for the non-persisting update stub."""

    def test_echoes_synthesized_member(self) -> None:
        store = FakeMemberStore()
        writer = ResponseWriter()

        assert MemberHandlers(store).update_member(writer, _request(id="7")) is None
        assert writer.status_code == 200
        assert json.loads(writer.body) == [{"name": "updated Name 7"}]
        assert store.list_calls == 0
        assert store.added == []


class TestDeleteMember:
    """Tests for MemberHandlers.delete_member."""

    def test_protected_id_is_rejected(self) -> None:
        writer = ResponseWriter()

        error = MemberHandlers(FakeMemberStore()).delete_member(writer, _request(id="2"))

        assert error is not None
        assert error.status == 409
        assert error.message == "invalid id: 2"
        assert isinstance(error.cause, BusinessRuleRejection)

    @pytest.mark.parametrize("member_id", ["1", "3", "20", "02"])
    def test_other_ids_succeed_with_default_status(self, member_id) -> None:
        writer = ResponseWriter()

        assert MemberHandlers(FakeMemberStore()).delete_member(writer, _request(id=member_id)) is None
        assert writer.status_code == 200
        assert writer.body == b""
        assert writer.headers["Content-Type"] == "application/json"


class TestOrderHandlers:
    """Tests for OrderHandlers."""

    def test_list_on_empty_store_is_empty_array(self) -> None:
        writer = ResponseWriter()
        assert OrderHandlers(FakeOrderStore()).list_orders(writer, _request()) is None
        assert writer.body == b"[]"

    def test_create_persists_once_and_answers_201(self) -> None:
        store = FakeOrderStore()
        writer = ResponseWriter()

        assert OrderHandlers(store).create_order(writer, _request(b'{"name": "Tea"}')) is None
        assert store.added == [Order(name="Tea")]
        assert writer.status_code == 201
        assert writer.headers["Location"] == "/orders/1"
        assert json.loads(writer.body) == {"name": "Tea", "id": 1}

    def test_null_name_reads_as_empty(self) -> None:
        store = FakeOrderStore()

        assert OrderHandlers(store).create_order(ResponseWriter(), _request(b'{"name": null}')) is None
        assert store.added == [Order(name="")]

    def test_malformed_body_never_reaches_store(self) -> None:
        store = FakeOrderStore()

        error = OrderHandlers(store).create_order(ResponseWriter(), _request(b"not json"))

        assert error is not None
        assert error.status == 400
        assert store.added == []

    def test_store_failure_on_list(self) -> None:
        store = FakeOrderStore()
        store.fail_with = StoreError("connection reset")

        error = OrderHandlers(store).list_orders(ResponseWriter(), _request())

        assert error is not None
        assert error.status == 500
        assert error.message == "connection reset"
