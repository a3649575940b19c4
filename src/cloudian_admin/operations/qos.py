from __future__ import annotations

from ..client import CloudianClient
from ..models import QoS, User
from ..observability import log_event
from ..qos import GROUP_QOS_USER_ID, decode_qos, qos_query_map
from ._decode import decode_for, user_key


async def _get_qos(client: CloudianClient, user_id: str, group_id: str) -> QoS:
    key = user_key(user_id, group_id)
    payload = await client.get(
        "/qos/limits",
        params={"userId": user_id, "groupId": group_id},
        operation="get_qos",
        key=key,
        not_found_on_empty=True,
    )
    return decode_for(decode_qos, payload, operation="get_qos", key=key)


async def _set_qos(
    client: CloudianClient, user_id: str, group_id: str, qos: QoS
) -> None:
    key = user_key(user_id, group_id)
    await client.post(
        "/qos/limits",
        params=qos_query_map(user_id, group_id, qos),
        operation="set_qos",
        key=key,
    )
    log_event("qos.updated", operation="set_qos", key=key)


async def get_user_qos(client: CloudianClient, user: User) -> QoS:
    return await _get_qos(client, user.user_id, user.group_id)


async def set_user_qos(client: CloudianClient, user: User, qos: QoS) -> None:
    await _set_qos(client, user.user_id, user.group_id, qos)


async def get_group_qos(client: CloudianClient, group_id: str) -> QoS:
    """Group-wide default limits, applied to users without their own."""
    return await _get_qos(client, GROUP_QOS_USER_ID, group_id)


async def set_group_qos(client: CloudianClient, group_id: str, qos: QoS) -> None:
    await _set_qos(client, GROUP_QOS_USER_ID, group_id, qos)
