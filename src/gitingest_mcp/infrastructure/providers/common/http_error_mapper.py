"""Translate provider HTTP responses into the structured error hierarchy."""

import httpx

from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import (
    AccessDeniedError,
    InvalidInputError,
    NotFoundError,
    ProviderError,
    RateLimitedError,
)

_RATE_LIMIT_HINT = "rate limit"


def _response_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()[:200] or response.reason_phrase
    if isinstance(body, dict):
        message = body.get("message") or body.get("error") or body.get("error_description")
        if message:
            return str(message)
    return response.reason_phrase


def is_rate_limited(response: httpx.Response) -> bool:
    if response.status_code == 429:
        return True
    if response.status_code != 403:
        return False
    if response.headers.get("x-ratelimit-remaining") == "0":
        return True
    return _RATE_LIMIT_HINT in response.text.lower()


def raise_for_provider_status(provider: ProviderType, response: httpx.Response) -> None:
    """Raise the matching GitIngestError for a non-2xx response; no-op otherwise."""
    if response.is_success:
        return

    status = response.status_code
    message = _response_message(response)
    name = provider.value

    if status == 404:
        raise NotFoundError(name, f"Repository or path not found: {message}", status)
    if is_rate_limited(response):
        raise RateLimitedError(name, f"API rate limit exceeded: {message}", status)
    if status in (401, 403):
        raise AccessDeniedError(name, f"Access denied: {message}", status)
    if status in (400, 422):
        raise InvalidInputError(f"{name}: invalid request: {message}")
    raise ProviderError(name, f"API error: {message}", status)
