# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Built-in async fetch capability using urllib.

Python has no process-wide ``fetch``, so this module provides one with the
same convention as a browser fetch: any HTTP status is a ``Response``, and
only construction or transport problems raise (``FetchError``).
The blocking urllib call runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import http.client
import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import certifi

from guarded_fetch.config import FetchConfig
from guarded_fetch.errors import ConfigError, FetchError
from guarded_fetch.logger import get_logger

log = get_logger(__name__)

Headers = Mapping[str, str] | Iterable[tuple[str, str]]
Fetch = Callable[..., Awaitable["Response"]]

_BODYLESS_METHODS = frozenset({"GET", "HEAD"})


@dataclass(frozen=True, slots=True)
class Response:
    """A completed HTTP exchange, whatever its status."""

    url: str
    status: int
    reason: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    redirected: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding, errors="replace")

    def json(self) -> Any:
        return json.loads(self.body)


def _ssl_context(config: FetchConfig) -> ssl.SSLContext:
    cafile = config.ca_file or certifi.where()
    try:
        return ssl.create_default_context(cafile=cafile)
    except (OSError, ssl.SSLError) as exc:
        raise ConfigError(f"Cannot load CA bundle {cafile}: {exc}") from exc


def _header_items(headers: Headers | None) -> list[tuple[str, str]]:
    if headers is None:
        return []
    if isinstance(headers, Mapping):
        return [(str(k), str(v)) for k, v in headers.items()]
    return [(str(k), str(v)) for k, v in headers]


def _build_request(
    resource: str,
    options: Mapping[str, Any],
    config: FetchConfig,
) -> urllib.request.Request:
    """Translate a fetch-style call into a urllib Request."""
    method = str(options.get("method") or "GET").upper()

    body = options.get("body")
    if isinstance(body, str):
        body = body.encode("utf-8")
    if body is not None and not isinstance(body, (bytes, bytearray)):
        raise FetchError(f"Unsupported body type: {type(body).__name__}", url=str(resource))
    if body is not None and method in _BODYLESS_METHODS:
        raise FetchError(f"Request with {method} method cannot have a body", url=str(resource))

    try:
        req = urllib.request.Request(str(resource), data=body, method=method)
    except ValueError as exc:
        raise FetchError(f"Invalid URL: {resource}", url=str(resource)) from exc

    if req.type not in ("http", "https"):
        raise FetchError(f"Unsupported URL scheme: {req.type}", url=str(resource))

    try:
        for name, value in _header_items(options.get("headers")):
            req.add_header(name, value)
    except (TypeError, ValueError) as exc:
        raise FetchError(f"Invalid headers: {exc}", url=str(resource)) from exc

    if not req.has_header("User-agent"):
        req.add_header("User-Agent", config.user_agent)
    return req


def _error_response(exc: urllib.error.HTTPError, url: str) -> Response:
    """Read a non-2xx reply; a broken body is still a transport failure."""
    final_url = exc.geturl() or url
    try:
        body = exc.read()
        headers = dict(exc.headers.items()) if exc.headers else {}
    except (OSError, http.client.HTTPException) as err:
        raise FetchError(f"Network error reading HTTP {exc.code} body: {err}", url=url) from err
    finally:
        exc.close()
    return Response(
        url=final_url,
        status=exc.code,
        reason=str(exc.reason or ""),
        headers=headers,
        body=body,
        redirected=final_url != url,
    )


def _send(
    req: urllib.request.Request,
    timeout: float | None,
    ctx: ssl.SSLContext,
) -> Response:
    """Single blocking exchange. HTTP error statuses become a Response."""
    kwargs: dict[str, Any] = {"context": ctx}
    if timeout is not None:
        kwargs["timeout"] = timeout

    url = req.full_url
    try:
        with urllib.request.urlopen(req, **kwargs) as resp:
            final_url = resp.geturl()
            return Response(
                url=final_url,
                status=resp.status,
                reason=resp.reason or "",
                headers=dict(resp.headers.items()),
                body=resp.read(),
                redirected=final_url != url,
            )
    except urllib.error.HTTPError as exc:
        return _error_response(exc, url)
    except urllib.error.URLError as exc:
        raise FetchError(f"Connection error: {exc.reason}", url=url) from exc
    except TimeoutError as exc:
        raise FetchError(f"Timeout after {timeout}s", url=url) from exc
    except (OSError, http.client.HTTPException) as exc:
        raise FetchError(f"Network error: {exc}", url=url) from exc


def create_fetch(config: FetchConfig) -> Fetch:
    """Build an async ``fetch(resource, options=None)`` bound to ``config``."""
    ctx = _ssl_context(config)

    async def fetch(resource: str, options: Mapping[str, Any] | None = None) -> Response:
        req = _build_request(resource, options or {}, config)
        log.debug("%s %s", req.get_method(), req.full_url)
        response = await asyncio.to_thread(_send, req, config.timeout, ctx)
        log.debug("%s %s → %d", req.get_method(), response.url, response.status)
        return response

    return fetch


fetch = create_fetch(FetchConfig())
