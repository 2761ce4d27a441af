"""
Fallible handlers for the members and orders resources.

Create handlers run decode -> convert -> persist -> respond and stop at
the first failing stage, returning an AppError for it. List handlers
only persist (read) and respond. Nothing is rolled back: if encoding
fails after a successful add, the new entity stays stored.

Stores and converters are passed in through the constructors; no
handler holds mutable state, so one instance serves concurrent
requests.
"""

import logging
from dataclasses import replace
from typing import Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ucwork.domain.resources.errors import (
    BusinessRuleRejection,
    ConversionError,
    DecodeError,
    EncodeError,
    StoreError,
    WriteError,
)
from ucwork.domain.resources.ports import MemberStore, OrderStore
from ucwork.interfaces.resources.converters import (
    Converter,
    MemberConverter,
    OrderConverter,
)
from ucwork.interfaces.resources.schemas import (
    MemberRequest,
    MemberResource,
    OrderRequest,
    OrderResource,
)
from ucwork.shared.dispatch import HandlerRequest, ResponseWriter
from ucwork.shared.errors.envelope import AppError, app_error_format

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
HTTP_201 = 201

# Members with this id cannot be deleted.
REJECTED_MEMBER_ID = "2"

_MEMBER = TypeAdapter(MemberResource)
_MEMBER_LIST = TypeAdapter(list[MemberResource])
_ORDER = TypeAdapter(OrderResource)
_ORDER_LIST = TypeAdapter(list[OrderResource])


def _describe(exc: ValidationError) -> str:
    """Short, single-line summary of a validation failure."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def _decode(model: type[BaseModel], body: bytes) -> BaseModel:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(_describe(exc), cause=exc) from exc


def _encode(adapter: TypeAdapter, value: Any) -> bytes:
    try:
        return adapter.dump_json(value, exclude_none=True)
    except PydanticSerializationError as exc:
        raise EncodeError(str(exc), cause=exc) from exc


def _write_json(writer: ResponseWriter, adapter: TypeAdapter, value: Any) -> Optional[AppError]:
    """Encode ``value`` and write it as a JSON body (respond stage)."""
    try:
        payload = _encode(adapter, value)
    except EncodeError as exc:
        return app_error_format(exc, "%s", exc)

    try:
        writer.write(payload)
    except WriteError as exc:
        return app_error_format(exc, "%s", exc)

    writer.set_header("Content-Type", JSON_CONTENT_TYPE)
    return None


class MemberHandlers:
    """Handlers behind the /members routes."""

    def __init__(self, store: MemberStore, converter: Optional[Converter] = None) -> None:
        self._store = store
        self._converter = converter or MemberConverter()

    def list_members(self, writer: ResponseWriter, request: HandlerRequest) -> Optional[AppError]:
        """GET /members: every stored member, implicit 200."""
        try:
            members = self._store.list_members()
        except StoreError as exc:
            return app_error_format(exc, "%s", exc)

        return _write_json(
            writer, _MEMBER_LIST, [MemberResource.from_entity(m) for m in members]
        )

    def create_member(self, writer: ResponseWriter, request: HandlerRequest) -> Optional[AppError]:
        """POST /members: store a member, 201 with a Location header."""
        try:
            member_request = _decode(MemberRequest, request.body)
        except DecodeError as exc:
            return app_error_format(exc, "decode error: %s", exc)

        try:
            member = self._converter.convert(member_request)
        except ConversionError as exc:
            return app_error_format(exc, "convert error: %s", exc)

        try:
            member_id = self._store.add_member(member)
        except StoreError as exc:
            return app_error_format(exc, "add db error: %s", exc)

        logger.info("Created member id=%s.", member_id)
        created = replace(member, id=member_id)
        error = _write_json(writer, _MEMBER, MemberResource.from_entity(created))
        if error is not None:
            return error

        writer.set_header("Location", f"/members/{member_id}")
        writer.write_status(HTTP_201)
        return None

    def update_member(self, writer: ResponseWriter, request: HandlerRequest) -> Optional[AppError]:
        """PUT /members/{id}: echo a synthesized member.

        Known limitation: neither the body nor the store is touched, the
        response is built from the path id alone.
        """
        member_id = request.path_params["id"]
        return _write_json(
            writer, _MEMBER_LIST, [MemberResource(name=f"updated Name {member_id}")]
        )

    def delete_member(self, writer: ResponseWriter, request: HandlerRequest) -> Optional[AppError]:
        """DELETE /members/{id}: reject the protected id, accept any other.

        Success leaves the status at the writer default and writes no body.
        """
        member_id = request.path_params["id"]
        if member_id == REJECTED_MEMBER_ID:
            rejection = BusinessRuleRejection(f"member {member_id} cannot be deleted")
            return app_error_format(rejection, "invalid id: %s", member_id)

        writer.set_header("Content-Type", JSON_CONTENT_TYPE)
        return None


class OrderHandlers:
    """Handlers behind the /orders routes."""

    def __init__(self, store: OrderStore, converter: Optional[Converter] = None) -> None:
        self._store = store
        self._converter = converter or OrderConverter()

    def list_orders(self, writer: ResponseWriter, request: HandlerRequest) -> Optional[AppError]:
        """GET /orders: every stored order, implicit 200."""
        try:
            orders = self._store.list_orders()
        except StoreError as exc:
            return app_error_format(exc, "%s", exc)

        return _write_json(
            writer, _ORDER_LIST, [OrderResource.from_entity(o) for o in orders]
        )

    def create_order(self, writer: ResponseWriter, request: HandlerRequest) -> Optional[AppError]:
        """POST /orders: store an order, 201 with a Location header."""
        try:
            order_request = _decode(OrderRequest, request.body)
        except DecodeError as exc:
            return app_error_format(exc, "decode error: %s", exc)

        try:
            order = self._converter.convert(order_request)
        except ConversionError as exc:
            return app_error_format(exc, "convert error: %s", exc)

        try:
            order_id = self._store.add_order(order)
        except StoreError as exc:
            return app_error_format(exc, "add db error: %s", exc)

        logger.info("Created order id=%s.", order_id)
        created = replace(order, id=order_id)
        error = _write_json(writer, _ORDER, OrderResource.from_entity(created))
        if error is not None:
            return error

        writer.set_header("Location", f"/orders/{order_id}")
        writer.write_status(HTTP_201)
        return None
