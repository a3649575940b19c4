from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..client import CloudianClient
from ..models import User
from ..observability import log_event
from ..pagination import LIST_LIMIT, Paginator
from ..translate import decode_user, decode_users, user_to_wire
from ._decode import decode_for, user_key, user_params

USER_TYPES = ("all", "User", "GroupAdmin", "SystemAdmin")
USER_STATUSES = ("all", "active", "inactive")


async def get_user(client: CloudianClient, user_id: str, group_id: str) -> User:
    key = user_key(user_id, group_id)
    payload = await client.get(
        "/user",
        params={"userId": user_id, "groupId": group_id},
        operation="get_user",
        key=key,
        not_found_on_empty=True,
    )
    return decode_for(decode_user, payload, operation="get_user", key=key)


async def create_user(client: CloudianClient, user: User) -> None:
    key = user_key(user.user_id, user.group_id)
    # canonicalUserId is assigned by the server
    payload = user_to_wire(user).to_payload()
    payload.pop("canonicalUserId", None)
    await client.put("/user", json=payload, operation="create_user", key=key)
    log_event("user.created", operation="create_user", key=key)


async def delete_user(client: CloudianClient, user: User) -> None:
    key = user_key(user.user_id, user.group_id)
    params = user_params(user)
    if user.canonical_user_id:
        params["canonicalUserId"] = user.canonical_user_id
    await client.delete("/user", params=params, operation="delete_user", key=key)
    log_event("user.deleted", operation="delete_user", key=key)


async def list_users(
    client: CloudianClient,
    group_id: str,
    *,
    user_type: str = "all",
    user_status: str = "active",
    prefix: Optional[str] = None,
    list_limit: int = LIST_LIMIT,
) -> List[User]:
    """
    List every user in a group, in server order.

    user_type / user_status / prefix narrow the listing server-side.
    """
    if user_type not in USER_TYPES:
        raise ValueError(f"user_type must be one of {USER_TYPES}, got {user_type!r}")
    if user_status not in USER_STATUSES:
        raise ValueError(
            f"user_status must be one of {USER_STATUSES}, got {user_status!r}"
        )

    async def fetch_page(offset: int, window: int) -> List[User]:
        params: Dict[str, Any] = {
            "groupId": group_id,
            "userType": user_type,
            "userStatus": user_status,
            "limit": window,
        }
        if offset:
            params["offset"] = offset
        if prefix:
            params["prefix"] = prefix
        payload = await client.get(
            "/user/list", params=params, operation="list_users", key=group_id
        )
        return decode_for(decode_users, payload, operation="list_users", key=group_id)

    return await Paginator(fetch_page, list_limit=list_limit).collect()
