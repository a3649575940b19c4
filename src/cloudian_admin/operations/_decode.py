"""
Shared helpers for operation modules.
"""

from typing import Any, Callable, Optional, TypeVar

from ..errors import CloudianDecodeError
from ..models import User

T = TypeVar("T")


def decode_for(
    decoder: Callable[[Any], T],
    payload: Any,
    *,
    operation: str,
    key: Optional[str],
) -> T:
    """Run a translate.decode_* function, tagging failures with the operation."""
    try:
        return decoder(payload)
    except CloudianDecodeError as exc:
        if exc.operation:
            raise
        raise CloudianDecodeError(str(exc), operation=operation, key=key) from exc


def user_key(user_id: str, group_id: str) -> str:
    return f"{group_id}/{user_id}"


def user_params(user: User) -> dict:
    return {"userId": user.user_id, "groupId": user.group_id}
