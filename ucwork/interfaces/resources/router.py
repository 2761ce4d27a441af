"""
Router for the members and orders resources.

Every route is a fallible handler wrapped by ``dispatch``. Member ids
must match ``[0-9]+``; any other id segment leaves the path unrouted
(404) and never reaches a handler. The id is passed on as the matched
string.
"""

from typing import Optional

from fastapi import APIRouter
from slowapi import Limiter
from starlette.convertors import Convertor, register_url_convertor

from ucwork.domain.resources.ports import MemberStore, OrderStore
from ucwork.interfaces.resources.handlers import MemberHandlers, OrderHandlers
from ucwork.shared.dispatch import dispatch
from ucwork.shared.security.rate_limiting import rate_limited


class NumericIdConvertor(Convertor):
    """Path convertor matching ``[0-9]+`` and keeping the raw digits."""

    regex = "[0-9]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("numeric", NumericIdConvertor())


# (path, method, summary, handler attribute)
MEMBER_ROUTES = [
    ("/members", "GET", "List members", "list_members"),
    ("/members", "POST", "Create a member", "create_member"),
    ("/members/{id:numeric}", "PUT", "Update a member (not persisted)", "update_member"),
    ("/members/{id:numeric}", "DELETE", "Delete a member", "delete_member"),
]
ORDER_ROUTES = [
    ("/orders", "GET", "List orders", "list_orders"),
    ("/orders", "POST", "Create an order", "create_order"),
]


def build_router(
    member_store: MemberStore,
    order_store: OrderStore,
    limiter: Optional[Limiter] = None,
    rate_limit: Optional[str] = None,
) -> APIRouter:
    """Build the resource router around the given stores.

    Args:
        member_store: Store backing the /members routes.
        order_store: Store backing the /orders routes.
        limiter: Limiter applied to every resource route, if any.
        rate_limit: Per-client limit string, e.g. ``"60/minute"``.
            Required when ``limiter`` is given.

    Returns:
        An APIRouter ready to be included in the application.
    """
    handler_sets = [
        ("members", MemberHandlers(member_store), MEMBER_ROUTES),
        ("orders", OrderHandlers(order_store), ORDER_ROUTES),
    ]

    router = APIRouter()
    for tag, handlers, routes in handler_sets:
        for path, method, summary, name in routes:
            endpoint = dispatch(getattr(handlers, name))
            if limiter is not None:
                endpoint = rate_limited(limiter, rate_limit, endpoint)
            router.add_api_route(
                path, endpoint, methods=[method], tags=[tag], summary=summary
            )
    return router
