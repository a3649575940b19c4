from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..client import CloudianClient
from ..models import Group
from ..observability import log_event
from ..pagination import LIST_LIMIT, Paginator
from ..translate import decode_group, decode_groups, group_to_wire
from ._decode import decode_for


async def get_group(client: CloudianClient, group_id: str) -> Group:
    """
    Fetch one group. An unknown group raises CloudianNotFoundError
    (the API answers 204 with no body rather than 404).
    """
    payload = await client.get(
        "/group",
        params={"groupId": group_id},
        operation="get_group",
        key=group_id,
        not_found_on_empty=True,
    )
    return decode_for(decode_group, payload, operation="get_group", key=group_id)


async def create_group(client: CloudianClient, group: Group) -> None:
    await client.put(
        "/group",
        json=group_to_wire(group).to_payload(),
        operation="create_group",
        key=group.group_id,
    )
    log_event("group.created", operation="create_group", key=group.group_id)


async def update_group(client: CloudianClient, group: Group) -> None:
    # group_id selects the record; it cannot be renamed
    await client.post(
        "/group",
        json=group_to_wire(group).to_payload(),
        operation="update_group",
        key=group.group_id,
    )
    log_event("group.updated", operation="update_group", key=group.group_id)


async def delete_group(client: CloudianClient, group_id: str) -> None:
    await client.delete(
        "/group",
        params={"groupId": group_id},
        operation="delete_group",
        key=group_id,
    )
    log_event("group.deleted", operation="delete_group", key=group_id)


async def list_groups(
    client: CloudianClient,
    *,
    prefix: Optional[str] = None,
    list_limit: int = LIST_LIMIT,
) -> List[Group]:
    """List all groups, optionally restricted to ids starting with prefix."""

    async def fetch_page(offset: int, window: int) -> List[Group]:
        params: Dict[str, Any] = {"limit": window}
        if offset:
            params["offset"] = offset
        if prefix:
            params["prefix"] = prefix
        payload = await client.get(
            "/group/list", params=params, operation="list_groups", key=prefix
        )
        return decode_for(
            decode_groups, payload, operation="list_groups", key=prefix
        )

    return await Paginator(fetch_page, list_limit=list_limit).collect()
