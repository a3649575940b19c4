"""cloudian_admin package exports."""

from .client import ClientConfig, CloudianClient
from .config import create_client_from_env, load_env_config
from .errors import (
    CloudianClientError,
    CloudianDecodeError,
    CloudianHTTPError,
    CloudianNotFoundError,
    CloudianTransportError,
    CloudianValidationError,
    is_not_found,
)
from .logging import setup_logging
from .models import GB, KB, MB, TB, Group, LdapConfig, QoS, SecurityInfo, User
from .operations import (
    create_group,
    create_user,
    create_user_credentials,
    delete_group,
    delete_user,
    delete_user_credentials,
    get_group,
    get_group_qos,
    get_user,
    get_user_credentials,
    get_user_qos,
    list_groups,
    list_user_credentials,
    list_users,
    set_group_qos,
    set_user_qos,
    update_group,
)
from .pagination import LIST_LIMIT

__all__ = [
    # Client
    "CloudianClient",
    "ClientConfig",
    "create_client_from_env",
    "load_env_config",
    "setup_logging",
    # Exceptions
    "CloudianClientError",
    "CloudianNotFoundError",
    "CloudianDecodeError",
    "CloudianHTTPError",
    "CloudianValidationError",
    "CloudianTransportError",
    "is_not_found",
    # Models
    "Group",
    "LdapConfig",
    "User",
    "SecurityInfo",
    "QoS",
    "KB",
    "MB",
    "GB",
    "TB",
    "LIST_LIMIT",
    # Operations
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
