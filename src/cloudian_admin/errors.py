from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union


class CloudianClientError(Exception):
    """Base error for client failures."""

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        key: Optional[str] = None,
    ):
        prefix = ""
        if operation:
            prefix = f"{operation}({key})" if key else operation
            prefix += ": "
        super().__init__(f"{prefix}{message}")
        self.operation = operation
        self.key = key


class CloudianNotFoundError(CloudianClientError):
    """The API answered a get-by-key with no content."""


class CloudianDecodeError(CloudianClientError):
    """A response payload did not match the expected wire schema."""


class CloudianHTTPError(CloudianClientError):
    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int],
        method: str,
        url: str,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
        operation: Optional[str] = None,
        key: Optional[str] = None,
    ):
        status = status_code if status_code is not None else "-"
        super().__init__(
            f"{status} {method} {url}: {message}", operation=operation, key=key
        )
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response_json = response_json
        self.response_text = response_text


class CloudianValidationError(CloudianHTTPError):
    """The API rejected the request (4xx with an error payload)."""


class CloudianTransportError(CloudianHTTPError):
    """Network failure or an HTTP status not otherwise classified."""


def is_not_found(exc: Optional[BaseException]) -> bool:
    """
    True if exc, or anything it was raised from, is a CloudianNotFoundError.
    Only explicit `raise ... from` links are followed; an error raised while
    handling a not-found is a failure of its own.
    """
    seen = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, CloudianNotFoundError):
            return True
        seen.add(id(exc))
        exc = exc.__cause__
    return False


def _error_message(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for field in ("message", "error", "reason"):
            value = payload.get(field)
            if value:
                return str(value)
    return None


def classify_response(
    status_code: int,
    body: Union[bytes, str, None],
    *,
    method: str,
    url: str,
    operation: Optional[str] = None,
    key: Optional[str] = None,
    not_found_on_empty: bool = False,
) -> Optional[CloudianClientError]:
    """
    Map an HTTP status and raw body to a domain error, or None on success.

    - get-by-key operations signal absence with an empty 2xx body (usually 204)
    - 4xx with a JSON body -> CloudianValidationError
    - anything else non-2xx -> CloudianTransportError
    """
    if isinstance(body, bytes):
        text = body.decode("utf-8", errors="replace")
    else:
        text = body or ""

    if 200 <= status_code < 300:
        if not_found_on_empty and (status_code == 204 or not text.strip()):
            return CloudianNotFoundError(
                "no content returned", operation=operation, key=key
            )
        return None

    response_json: Optional[Dict[str, Any]] = None
    parsed: Any = None
    parseable = False
    if text.strip():
        try:
            parsed = json.loads(text)
            parseable = True
        except ValueError:
            parsed = None
    if isinstance(parsed, dict):
        response_json = parsed

    if 400 <= status_code < 500 and parseable:
        return CloudianValidationError(
            _error_message(parsed) or "request rejected",
            status_code=status_code,
            method=method,
            url=url,
            response_json=response_json,
            response_text=text[:500],
            operation=operation,
            key=key,
        )

    return CloudianTransportError(
        _error_message(parsed) or "request failed",
        status_code=status_code,
        method=method,
        url=url,
        response_json=response_json,
        response_text=text[:500],
        operation=operation,
        key=key,
    )


__all__ = [
    "CloudianClientError",
    "CloudianNotFoundError",
    "CloudianDecodeError",
    "CloudianHTTPError",
    "CloudianValidationError",
    "CloudianTransportError",
    "classify_response",
    "is_not_found",
]
