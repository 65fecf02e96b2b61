"""Sync and async HTTP transports for the private Notion API.

Each transport follows the same request lifecycle:

1. Send a ``POST`` with the ``token_v2`` cookie and a JSON body.
2. On ``2xx`` -- return the parsed JSON response (``{}`` when empty).
3. On any other status -- raise the matching typed error immediately.
4. On any transport failure (timeout, connection, protocol) -- raise
   :class:`NotionTxNetworkError`.

A 2xx response whose body is not JSON counts as success and yields ``{}``.

Nothing is retried and nothing is rate limited; every call is independent.
"""

from __future__ import annotations

import json as _json
import sys
import time
from typing import Any

import httpx

from notiontx.account import Account
from notiontx.config import NotionTxConfig
from notiontx.errors import (
    NotionTxAuthError,
    NotionTxNetworkError,
    NotionTxNotFoundError,
    NotionTxPermissionError,
    NotionTxServerError,
    NotionTxValidationError,
)
from notiontx.observability import NoopMetricsHook, get_logger

log = get_logger("notiontx.transport")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
    """Raise the :class:`NotionTxError` subclass matching a non-2xx response."""
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    store_message = body.get("message", response.text[:500])
    store_name = body.get("name", "")

    if status == 401:
        raise NotionTxAuthError(
            message=f"Authentication failed on {method} {path}: {store_message}",
            context={"status_code": status, "name": store_name},
        )
    if status == 403:
        raise NotionTxPermissionError(
            message=f"Permission denied on {method} {path}: {store_message}",
            context={
                "status_code": status,
                "name": store_name,
                "operation": f"{method} {path}",
            },
        )
    if status == 404:
        raise NotionTxNotFoundError(
            message=f"Resource not found on {method} {path}: {store_message}",
            context={"status_code": status, "name": store_name, "path": path},
        )
    if status == 429 or status >= 500:
        raise NotionTxServerError(
            message=f"Server error {status} on {method} {path}: {store_message}",
            context={"status_code": status, "name": store_name, "body": body},
        )

    raise NotionTxValidationError(
        message=f"Client error {status} on {method} {path}: {store_message}",
        context={"status_code": status, "name": store_name, "body": body},
    )


def _dump_payload(
    method: str,
    url: str,
    payload: dict | None,
    response_status: int | None,
    response_body: Any | None,
    token: str | None = None,
) -> None:
    """Write a redacted debug dump of the request/response to stderr."""
    from notiontx.utils.redact import redact

    dump: dict[str, Any] = {
        "method": method,
        "url": url,
    }
    if payload is not None:
        dump["request_body"] = payload
    if response_status is not None:
        dump["response_status"] = response_status
    if response_body is not None:
        dump["response_body"] = response_body
    print(
        _json.dumps(redact(dump, token), indent=2, default=str),
        file=sys.stderr,
    )


def _emit_debug_dump(
    config: NotionTxConfig,
    method: str,
    response: httpx.Response,
    json_payload: Any,
) -> None:
    if not config.debug_dump_payload:
        return
    try:
        resp_body = response.json()
    except ValueError:
        resp_body = response.text[:1000]
    _dump_payload(
        method, str(response.url), json_payload,
        response.status_code, resp_body,
        token=config.token,
    )


def _network_error(method: str, path: str, exc: Exception) -> NotionTxNetworkError:
    log.warning(
        "Request network error",
        extra={
            "extra_fields": {
                "op": "request",
                "method": method,
                "path": path,
                "error": str(exc),
            }
        },
    )
    return NotionTxNetworkError(
        message=f"Network error on {method} {path}: {exc}",
        context={"url": path},
        cause=exc,
    )


def _client_kwargs(config: NotionTxConfig, account: Account) -> dict[str, Any]:
    return {
        "base_url": config.base_url,
        "headers": {
            **account.auth_headers(),
            "Content-Type": "application/json",
        },
        "timeout": httpx.Timeout(config.timeout_seconds),
        "proxy": config.http_proxy,
    }


# ---------------------------------------------------------------------------
# Sync transport
# ---------------------------------------------------------------------------

class NotionTransport:
    """Synchronous HTTP transport.

    Parameters
    ----------
    config:
        A :class:`NotionTxConfig` controlling base URL, timeout and dumps.
    account:
        The :class:`Account` whose cookie authorizes every request.
    """

    def __init__(self, config: NotionTxConfig, account: Account) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
        self._client = httpx.Client(**_client_kwargs(config, account))

    def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Execute one HTTP request against the API.

        Parameters
        ----------
        method:
            HTTP method; the private API only uses ``POST``.
        path:
            Endpoint path relative to ``base_url`` (e.g. ``/submitTransaction``).
        **kwargs:
            Forwarded to :meth:`httpx.Client.request`.

        Returns
        -------
        dict
            Parsed JSON response body, ``{}`` for an empty body.

        Raises
        ------
        NotionTxAuthError, NotionTxPermissionError, NotionTxNotFoundError,
        NotionTxServerError, NotionTxValidationError
            On non-2xx responses.
        NotionTxNetworkError
            On timeouts, connection and protocol failures.
        """
        t0 = time.monotonic()
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            self._metrics.increment(
                "notiontx.requests_total",
                tags={"method": method, "path": path, "status": "error"},
            )
            raise _network_error(method, path, exc) from exc
        return _process_response(
            self._config, self._metrics, method, path, response,
            kwargs.get("json"), (time.monotonic() - t0) * 1000,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> NotionTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Async transport
# ---------------------------------------------------------------------------

class AsyncNotionTransport:
    """Asynchronous HTTP transport.

    Mirrors :class:`NotionTransport` but uses ``httpx.AsyncClient``.
    """

    def __init__(self, config: NotionTxConfig, account: Account) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
        self._client = httpx.AsyncClient(**_client_kwargs(config, account))

    async def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Execute one HTTP request against the API (async).

        See :meth:`NotionTransport.request` for full documentation.
        """
        t0 = time.monotonic()
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            self._metrics.increment(
                "notiontx.requests_total",
                tags={"method": method, "path": path, "status": "error"},
            )
            raise _network_error(method, path, exc) from exc
        return _process_response(
            self._config, self._metrics, method, path, response,
            kwargs.get("json"), (time.monotonic() - t0) * 1000,
        )

    async def close(self) -> None:
        """Close the underlying async HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncNotionTransport:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()


def _process_response(
    config: NotionTxConfig,
    metrics: Any,
    method: str,
    path: str,
    response: httpx.Response,
    json_payload: Any,
    elapsed_ms: float,
) -> dict:
    tags = {"method": method, "path": path, "status": str(response.status_code)}
    metrics.increment("notiontx.requests_total", tags=tags)
    metrics.timing("notiontx.request_duration_ms", elapsed_ms, tags=tags)

    _emit_debug_dump(config, method, response, json_payload)

    if 200 <= response.status_code < 300:
        if response.status_code == 204 or not response.content:
            return {}
        try:
            result: dict = response.json()
        except ValueError:
            return {}
        return result

    log.warning(
        "Request rejected",
        extra={
            "extra_fields": {
                "op": "request",
                "method": method,
                "path": path,
                "status_code": response.status_code,
            }
        },
    )
    _raise_for_status(response, method, path)
    return {}  # pragma: no cover
