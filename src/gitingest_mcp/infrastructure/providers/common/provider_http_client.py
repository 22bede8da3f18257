from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import ProviderError, UpstreamParseError
from gitingest_mcp.infrastructure.observability import get_logger
from gitingest_mcp.infrastructure.providers.common.http_error_mapper import (
    raise_for_provider_status,
)

logger = get_logger(__name__)

T = TypeVar("T")


class ProviderHttpClient:
    """Minimal async JSON GET client shared by the provider adapters.

    A fresh ``httpx.AsyncClient`` is opened per call, so one instance can be
    used from many concurrent tasks. Headers (including the token) are fixed
    at construction.
    """

    def __init__(
        self,
        provider: ProviderType,
        base_url: str,
        headers: dict[str, str],
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.provider = provider
        self.base_url = base_url.rstrip("/")
        self._headers = headers
        self._timeout = timeout
        self._transport = transport

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        query = {key: value for key, value in (params or {}).items() if value is not None}
        logger.debug("Provider request", provider=self.provider.value, url=url, params=query)

        try:
            async with httpx.AsyncClient(
                headers=self._headers, timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as exc:
            raise ProviderError(self.provider.value, f"Request to {url} failed: {exc}") from exc

        raise_for_provider_status(self.provider, response)
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamParseError(
                self.provider.value, f"Response from {url} is not valid JSON", response.status_code
            ) from exc

    def decode(self, adapter: TypeAdapter[T], payload: Any, what: str) -> T:
        """Validate ``payload`` against ``adapter``, mapping failures to UpstreamParseError."""
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise UpstreamParseError(
                self.provider.value, f"Unexpected {what} response: {exc.error_count()} error(s)"
            ) from exc
