"""
QoS limit encoding.

The API takes limits as flat query parameters in KB (byte-based quotas) or
plain counts, with a hard ("hl") and warning ("wl") level per metric. Warning
levels are always 75% of the hard level, computed in the hard level's unit.
Unlimited is -1 on the wire.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError

from .errors import CloudianDecodeError
from .models import KB, QoS
from .wire import QosLimitsWire

UNLIMITED = -1
WARNING_PERCENT = 75

# Group-level limits are addressed with this userId
GROUP_QOS_USER_ID = "*"

# (domain field, query-param suffix, limit-list type, byte based)
_METRICS = (
    ("storage_quota", "StorageQuotaKBytes", "STORAGE_QUOTA_KBYTES", True),
    ("storage_quota_count", "StorageQuotaCount", "STORAGE_QUOTA_COUNT", False),
    ("request_rate", "RequestRate", "REQUEST_RATE", False),
    ("data_rate_inbound", "DataKBytesIn", "DATAKBYTES_IN", True),
    ("data_rate_outbound", "DataKBytesOut", "DATAKBYTES_OUT", True),
)


def warning_level(hard: int) -> int:
    if hard == UNLIMITED:
        return UNLIMITED
    return hard * WARNING_PERCENT // 100


def _hard_level(value: Optional[int], byte_based: bool) -> int:
    if value is None:
        return UNLIMITED
    return value // KB if byte_based else value


def qos_query_map(user_id: str, group_id: str, qos: QoS) -> Dict[str, str]:
    params = {"userId": user_id, "groupId": group_id}
    for field, suffix, _, byte_based in _METRICS:
        hard = _hard_level(getattr(qos, field), byte_based)
        params[f"hl{suffix}"] = str(hard)
        params[f"wl{suffix}"] = str(warning_level(hard))
    return params


def _limit_value(raw: Any, limit_type: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise CloudianDecodeError(
            f"QoS limit {limit_type!r} is not an integer: {raw!r}"
        ) from exc


def decode_qos(payload: Any) -> QoS:
    """Read the hard limits out of a /qos/limits response; warnings are ignored."""
    if not isinstance(payload, dict):
        raise CloudianDecodeError(
            f"Expected a JSON object for QoS limits, got {type(payload).__name__}"
        )
    try:
        wire = QosLimitsWire.model_validate(payload)
    except ValidationError as exc:
        raise CloudianDecodeError(
            f"Response did not match QosLimitsWire: {exc}"
        ) from exc

    hard_levels = {
        limit.type: limit.value
        for limit in wire.qos_limit_list
        if limit.type.endswith("_LH")
    }

    fields: Dict[str, Optional[int]] = {}
    for field, _, limit_type, byte_based in _METRICS:
        raw = hard_levels.get(f"{limit_type}_LH")
        if raw is None:
            fields[field] = None
            continue
        value = _limit_value(raw, limit_type)
        if value < 0:
            fields[field] = None
        else:
            fields[field] = value * KB if byte_based else value
    return QoS(**fields)


__all__ = [
    "GROUP_QOS_USER_ID",
    "UNLIMITED",
    "WARNING_PERCENT",
    "decode_qos",
    "qos_query_map",
    "warning_level",
]
