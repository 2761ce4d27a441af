"""
Adapter: Member store on Google Cloud Datastore.

Implements MemberStore port.
Members are stored as entities of kind ``Member`` with a single
``name`` property; the datastore-allocated numeric key id is the
member's identity.
"""

import logging

from google.api_core.exceptions import GoogleAPIError
from google.cloud import datastore

from ucwork.domain.resources.entities import Member
from ucwork.domain.resources.errors import StoreError
from ucwork.domain.resources.ports import MemberStore

logger = logging.getLogger(__name__)

MEMBER_KIND = "Member"


class DatastoreMemberStore(MemberStore):
    """Persists members in Cloud Datastore.

    Implements the MemberStore port defined in the domain layer.
    """

    def __init__(self, client: datastore.Client) -> None:
        self._client = client

    def list_members(self) -> list[Member]:
        """Return every Member entity, in key order.

        Raises:
            StoreError: If the query fails.
        """
        query = self._client.query(kind=MEMBER_KIND)
        query.order = ["__key__"]
        try:
            entities = list(query.fetch())
        except GoogleAPIError as exc:
            raise StoreError(f"list members: {exc}", cause=exc) from exc

        return [
            Member(
                name=entity.get("name", ""),
                id=entity.key.id if entity.key is not None else None,
            )
            for entity in entities
        ]

    def add_member(self, member: Member) -> int:
        """Store a new Member entity and return its allocated id.

        Args:
            member: Member to persist. Its ``id`` is ignored.

        Returns:
            The numeric id Datastore assigned to the new key.

        Raises:
            StoreError: If the put fails.
        """
        entity = datastore.Entity(key=self._client.key(MEMBER_KIND))
        entity.update({"name": member.name})
        try:
            self._client.put(entity)
        except GoogleAPIError as exc:
            raise StoreError(f"add member: {exc}", cause=exc) from exc

        logger.debug("Stored member id=%s.", entity.key.id)
        return entity.key.id
