"""
Admin API operations, one coroutine per call. Each takes a CloudianClient first.
"""

from .credentials import (
    create_user_credentials,
    delete_user_credentials,
    get_user_credentials,
    list_user_credentials,
)
from .groups import create_group, delete_group, get_group, list_groups, update_group
from .qos import get_group_qos, get_user_qos, set_group_qos, set_user_qos
from .users import create_user, delete_user, get_user, list_users

__all__ = [
    "get_group",
    "create_group",
    "update_group",
    "delete_group",
    "list_groups",
    "get_user",
    "create_user",
    "delete_user",
    "list_users",
    "create_user_credentials",
    "get_user_credentials",
    "list_user_credentials",
    "delete_user_credentials",
    "get_user_qos",
    "set_user_qos",
    "get_group_qos",
    "set_group_qos",
]
