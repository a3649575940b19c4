from __future__ import annotations

import logging
from typing import Optional

_log = logging.getLogger("cloudian_admin.observability")


def log_event(
    event: str,
    *,
    operation: str,
    key: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Emit an INFO record for a state-changing admin call, e.g. "user.created".
    Only the operation name and its key are attached; payloads and secrets
    never reach the log.
    """
    (logger or _log).info(event, extra={"operation": operation, "key": key})


__all__ = ["log_event"]
