import json as jsonlib
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .errors import CloudianDecodeError, CloudianTransportError, classify_response

DEFAULT_USERNAME = "sysadmin"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    password: str
    username: str = DEFAULT_USERNAME
    timeout_seconds: float = 10.0
    verify_tls: bool = True


class CloudianClient:
    """
    Shared HTTP client for the Cloudian HyperStore Admin API.
    - Handles auth, base URL, timeouts
    - Maps status/body to typed errors; returns parsed JSON (None on empty body)
    - No retries; no state kept between calls
    """

    def __init__(
        self,
        *,
        base_url: str,
        password: str,
        username: str = DEFAULT_USERNAME,
        timeout_seconds: float = 10.0,
        verify_tls: bool = True,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        password = password or ""

        if not base_url:
            raise ValueError("base_url must be provided.")
        if not password:
            raise ValueError("password must be provided.")

        self.base_url = base_url
        self.username = username or DEFAULT_USERNAME
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("cloudian_admin.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            auth=httpx.BasicAuth(self.username, password),
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout_seconds,
            verify=verify_tls,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs) -> "CloudianClient":
        return cls(
            base_url=config.base_url,
            password=config.password,
            username=config.username,
            timeout_seconds=config.timeout_seconds,
            verify_tls=config.verify_tls,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "CloudianClient":
        """Build a client from CLOUDIAN_* environment variables (optional .env)."""
        from .config import load_env_config

        return cls.from_config(load_env_config(), **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "CloudianClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        operation: Optional[str] = None,
        key: Optional[str] = None,
        not_found_on_empty: bool = False,
    ) -> Any:
        """
        Core request method.
        - Raises CloudianNotFoundError on an empty body when not_found_on_empty
        - Raises CloudianValidationError / CloudianTransportError on failures
        - Raises CloudianDecodeError if a non-empty body isn't valid JSON
        - Returns parsed JSON, or None for an empty body
        """
        method = method.upper()
        start = time.perf_counter()

        try:
            resp = await self.http.request(method, url, params=params, json=json)
        except httpx.HTTPError as exc:
            raise CloudianTransportError(
                f"Network/HTTP error: {exc}",
                status_code=None,
                method=method,
                url=url,
                operation=operation,
                key=key,
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "cloudian.request",
            extra={
                "operation": operation,
                "method": method,
                "url": str(resp.request.url),
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        error = classify_response(
            resp.status_code,
            resp.content,
            method=method,
            url=str(resp.request.url),
            operation=operation,
            key=key,
            not_found_on_empty=not_found_on_empty,
        )
        if error is not None:
            raise error

        return self._safe_json(resp, operation=operation, key=key)

    def _safe_json(
        self,
        resp: httpx.Response,
        *,
        operation: Optional[str] = None,
        key: Optional[str] = None,
    ) -> Any:
        if not resp.content or not resp.content.strip():
            return None

        try:
            return jsonlib.loads(resp.content)
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise CloudianDecodeError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}",
                operation=operation,
                key=key,
            ) from exc

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        key: Optional[str] = None,
        not_found_on_empty: bool = False,
    ) -> Any:
        return await self.request(
            "GET",
            url,
            params=params,
            operation=operation,
            key=key,
            not_found_on_empty=not_found_on_empty,
        )

    async def put(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        operation: Optional[str] = None,
        key: Optional[str] = None,
    ) -> Any:
        return await self.request(
            "PUT", url, params=params, json=json, operation=operation, key=key
        )

    async def post(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        operation: Optional[str] = None,
        key: Optional[str] = None,
    ) -> Any:
        return await self.request(
            "POST", url, params=params, json=json, operation=operation, key=key
        )

    async def delete(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        key: Optional[str] = None,
    ) -> Any:
        return await self.request(
            "DELETE", url, params=params, operation=operation, key=key
        )


__all__ = ["ClientConfig", "CloudianClient", "DEFAULT_USERNAME"]
