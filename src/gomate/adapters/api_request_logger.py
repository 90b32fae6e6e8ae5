"""Opt-in logging of outgoing HTTP requests (set GOMATE_LOG_REQUESTS=true)."""

import json
import logging
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"

# Compared case-insensitively
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
SENSITIVE_FIELDS = frozenset({"password", "token", "accesstoken", "refreshtoken"})


def should_log_requests() -> bool:
    return os.getenv("GOMATE_LOG_REQUESTS", "").lower() == "true"


def redact(values: Mapping[str, Any], sensitive: frozenset[str]) -> dict[str, Any]:
    """Copy a mapping with every sensitive key's value replaced."""
    return {key: REDACTED if key.lower() in sensitive else value for key, value in values.items()}


def request_url(url: str, params: Mapping[str, Any] | None = None) -> str:
    """URL as sent, with params sorted by name."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def describe_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    payload: Any = None,
) -> str:
    """Multi-line description of a request with credentials redacted."""
    lines = [f"{method} {request_url(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(redact(headers, SENSITIVE_HEADERS), indent=2)}")
    if isinstance(payload, Mapping):
        body = json.dumps(
            redact(payload, SENSITIVE_FIELDS), indent=2, ensure_ascii=False, default=str
        )
        lines.append(f"Payload: {body}")
    elif payload is not None:
        lines.append(f"Payload: {payload}")
    return "\n".join(lines)


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log a request at INFO if GOMATE_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL without the query params.
        params: Query parameters.
        headers: Request headers. Authorization, cookies and API keys are redacted.
        payload: JSON body. Passwords and tokens are redacted.
    """
    if not should_log_requests():
        return
    logger.info("API Request:\n" + describe_request(method, url, params, headers, payload))
