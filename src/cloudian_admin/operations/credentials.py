from __future__ import annotations

from typing import List

from ..client import CloudianClient
from ..models import SecurityInfo, User
from ..observability import log_event
from ..translate import decode_security_info, decode_security_infos
from ._decode import decode_for, user_key, user_params


async def create_user_credentials(client: CloudianClient, user: User) -> SecurityInfo:
    """Generate a new access/secret key pair for user. Existing pairs stay valid."""
    key = user_key(user.user_id, user.group_id)
    payload = await client.put(
        "/user/credentials",
        params=user_params(user),
        operation="create_user_credentials",
        key=key,
    )
    info = decode_for(
        decode_security_info, payload, operation="create_user_credentials", key=key
    )
    # never log the secret
    log_event("credentials.created", operation="create_user_credentials", key=key)
    return info


async def get_user_credentials(client: CloudianClient, access_key: str) -> SecurityInfo:
    payload = await client.get(
        "/user/credentials",
        params={"accessKey": access_key},
        operation="get_user_credentials",
        key=access_key,
        not_found_on_empty=True,
    )
    return decode_for(
        decode_security_info,
        payload,
        operation="get_user_credentials",
        key=access_key,
    )


async def list_user_credentials(
    client: CloudianClient, user: User
) -> List[SecurityInfo]:
    """All key pairs of user; an empty response means the user has none."""
    key = user_key(user.user_id, user.group_id)
    payload = await client.get(
        "/user/credentials/list",
        params=user_params(user),
        operation="list_user_credentials",
        key=key,
    )
    return decode_for(
        decode_security_infos, payload, operation="list_user_credentials", key=key
    )


async def delete_user_credentials(client: CloudianClient, access_key: str) -> None:
    await client.delete(
        "/user/credentials",
        params={"accessKey": access_key},
        operation="delete_user_credentials",
        key=access_key,
    )
    log_event(
        "credentials.deleted", operation="delete_user_credentials", key=access_key
    )
