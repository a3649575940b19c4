"""
Wire <-> domain translation.

All tolerance for the API's format quirks lives here:
- booleans sent as "true"/"false" strings
- endpoint lists that are missing when every endpoint is allowed
- LDAP settings spread over flat optional fields
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Type, TypeVar

from pydantic import ValidationError

from .errors import CloudianDecodeError
from .models import Group, LdapConfig, SecurityInfo, User, default_endpoints
from .wire import BoolLike, GroupWire, SecurityInfoWire, UserWire, WireModel

W = TypeVar("W", bound=WireModel)
D = TypeVar("D")

_TRUE = "true"
_FALSE = "false"


def parse_bool(value: BoolLike, field: str, *, default: bool = False) -> bool:
    """Accept a native bool or a "true"/"false" string (any case)."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        literal = value.strip().lower()
        if literal == _TRUE:
            return True
        if literal == _FALSE:
            return False
    raise CloudianDecodeError(f"Field {field!r} is not a boolean: {value!r}")


def format_bool(value: bool) -> str:
    return _TRUE if value else _FALSE


def parse_endpoints(value: Optional[List[str]]) -> List[str]:
    if not value:
        return default_endpoints()
    return list(value)


def _build(factory: Callable[..., D], **fields: Any) -> D:
    try:
        return factory(**fields)
    except ValidationError as exc:
        raise CloudianDecodeError(str(exc)) from exc


# --- Group ---


def group_to_internal(wire: GroupWire) -> Group:
    ldap = _build(
        LdapConfig,
        enabled=parse_bool(wire.ldap_enabled, "ldapEnabled"),
        group=wire.ldap_group,
        match_attribute=wire.ldap_match_attribute,
        search=wire.ldap_search,
        search_user_base=wire.ldap_search_user_base,
        server_url=wire.ldap_server_url,
        user_dn_template=wire.ldap_user_dn_template,
    )
    return _build(
        Group,
        group_id=wire.group_id,
        group_name=wire.group_name or "",
        active=parse_bool(wire.active, "active"),
        ldap=ldap,
        s3_endpoints_http=parse_endpoints(wire.s3_endpoints_http),
        s3_endpoints_https=parse_endpoints(wire.s3_endpoints_https),
        s3_website_endpoints=parse_endpoints(wire.s3_website_endpoints),
    )


def group_to_wire(group: Group) -> GroupWire:
    return GroupWire(
        group_id=group.group_id,
        group_name=group.group_name,
        active=format_bool(group.active),
        ldap_enabled=group.ldap.enabled,
        ldap_group=group.ldap.group,
        ldap_match_attribute=group.ldap.match_attribute,
        ldap_search=group.ldap.search,
        ldap_search_user_base=group.ldap.search_user_base,
        ldap_server_url=group.ldap.server_url,
        ldap_user_dn_template=group.ldap.user_dn_template,
        s3_endpoints_http=list(group.s3_endpoints_http),
        s3_endpoints_https=list(group.s3_endpoints_https),
        s3_website_endpoints=list(group.s3_website_endpoints),
    )


# --- User ---

_USER_PROFILE_FIELDS = (
    "full_name",
    "email_addr",
    "address1",
    "address2",
    "city",
    "state",
    "zip",
    "country",
    "phone",
    "website",
    "canonical_user_id",
)


def user_to_internal(wire: UserWire) -> User:
    profile = {name: getattr(wire, name) for name in _USER_PROFILE_FIELDS}
    return _build(
        User,
        user_id=wire.user_id,
        group_id=wire.group_id,
        user_type=wire.user_type or "User",
        active=parse_bool(wire.active, "active", default=True),
        **profile,
    )


def user_to_wire(user: User) -> UserWire:
    profile = {name: getattr(user, name) for name in _USER_PROFILE_FIELDS}
    return UserWire(
        user_id=user.user_id,
        group_id=user.group_id,
        user_type=user.user_type,
        active=format_bool(user.active),
        **profile,
    )


# --- SecurityInfo ---


def security_info_to_internal(wire: SecurityInfoWire) -> SecurityInfo:
    return _build(
        SecurityInfo,
        access_key=wire.access_key,
        secret_key=wire.secret_key,
        active=parse_bool(wire.active, "active", default=True),
    )


def security_info_to_wire(info: SecurityInfo) -> SecurityInfoWire:
    return SecurityInfoWire(
        access_key=info.access_key,
        secret_key=info.secret_key,
        active=info.active,
    )


# --- Raw JSON entry points ---


def _validate(model: Type[W], payload: Any) -> W:
    if not isinstance(payload, dict):
        raise CloudianDecodeError(
            f"Expected a JSON object for {model.__name__}, "
            f"got {type(payload).__name__}"
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise CloudianDecodeError(
            f"Response did not match {model.__name__}: {exc}"
        ) from exc


def _validate_list(model: Type[W], payload: Any) -> List[W]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise CloudianDecodeError(
            f"Expected a JSON array of {model.__name__}, "
            f"got {type(payload).__name__}"
        )
    return [_validate(model, item) for item in payload]


def decode_group(payload: Any) -> Group:
    return group_to_internal(_validate(GroupWire, payload))


def decode_groups(payload: Any) -> List[Group]:
    return [group_to_internal(w) for w in _validate_list(GroupWire, payload)]


def decode_user(payload: Any) -> User:
    return user_to_internal(_validate(UserWire, payload))


def decode_users(payload: Any) -> List[User]:
    return [user_to_internal(w) for w in _validate_list(UserWire, payload)]


def decode_security_info(payload: Any) -> SecurityInfo:
    return security_info_to_internal(_validate(SecurityInfoWire, payload))


def decode_security_infos(payload: Any) -> List[SecurityInfo]:
    return [
        security_info_to_internal(w)
        for w in _validate_list(SecurityInfoWire, payload)
    ]


__all__ = [
    "parse_bool",
    "format_bool",
    "parse_endpoints",
    "group_to_internal",
    "group_to_wire",
    "user_to_internal",
    "user_to_wire",
    "security_info_to_internal",
    "security_info_to_wire",
    "decode_group",
    "decode_groups",
    "decode_user",
    "decode_users",
    "decode_security_info",
    "decode_security_infos",
]
