"""Share link construction.

``PUBLIC_BASE_URL`` wins when configured. Otherwise the base URL is rebuilt
from proxy headers (``X-Forwarded-Proto`` / ``X-Forwarded-Host``) or the
plain ``Host`` header, for both HTTP requests and Socket.IO handshakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from django.conf import settings

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Mapping


def _first_value(value: str | None) -> str | None:
    if not value:
        return None
    first = value.split(",")[0].strip()
    return first or None


def configured_base_url() -> str | None:
    base = getattr(settings, "PUBLIC_BASE_URL", "") or ""
    return base.rstrip("/") or None


def resolve_base_url(headers: Mapping[str, str], *, secure: bool = False) -> str | None:
    """Return ``<proto>://<host>`` for share links, or ``None`` if unknown.

    ``headers`` must be addressable by lower-case header names.
    """

    base = configured_base_url()
    if base:
        return base

    host = _first_value(headers.get("x-forwarded-host")) or _first_value(
        headers.get("host")
    )
    if not host:
        return None
    proto = _first_value(headers.get("x-forwarded-proto")) or (
        "https" if secure else "http"
    )
    return f"{proto}://{host}"


def share_link(base_url: str, event_id: str) -> str:
    return f"{base_url.rstrip('/')}/event/{event_id}"


def headers_from_environ(environ: dict[str, Any]) -> tuple[dict[str, str], bool]:
    """Extract lower-cased headers and the TLS flag from a handshake environ.

    python-socketio hands connect handlers a WSGI-style environ (``HTTP_*``
    keys), optionally carrying the raw ASGI scope under ``asgi.scope``.
    """

    headers: dict[str, str] = {}
    for key, value in environ.items():
        if isinstance(key, str) and key.startswith("HTTP_") and isinstance(value, str):
            headers[key[5:].replace("_", "-").lower()] = value

    scheme = environ.get("wsgi.url_scheme")
    scope = environ.get("asgi.scope")
    if isinstance(scope, dict):
        scheme = scope.get("scheme", scheme)
        for raw_name, raw_value in scope.get("headers") or ():
            name = raw_name.decode("latin-1").lower()
            headers.setdefault(name, raw_value.decode("latin-1"))

    secure = scheme in {"https", "wss"}
    return headers, secure
