import asyncio
import re
from logging import getLogger
from typing import Any, Optional

import httpx

from .._utils import append_query_params
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import CORS_MESSAGE, HEADER_ACCEPT, TIMEOUT_MESSAGE
from ..models.errors import NeopleApiError
from ._http import RequestConfig

logger = getLogger("neople")

_CORS_PATTERN = re.compile(
    r"failed to fetch|network request failed|\bcors\b", re.IGNORECASE
)


def _is_cors_error(error: Exception) -> bool:
    return _CORS_PATTERN.search(str(error)) is not None


class HttpxAdapter:
    """Default adapter, backed by :class:`httpx.AsyncClient`.

    Without an injected client a short-lived one is opened for every call, so
    concurrent calls share nothing.

    Examples:
        ```python
        import httpx
        from neople import HttpxAdapter, Neople

        async with httpx.AsyncClient(timeout=5.0) as client:
            neople = Neople(api_key="your-api-key", http_adapter=HttpxAdapter(client))
            result = await neople.df.search_character("홍길동")
        ```
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self._client = client

    async def get(self, url: str, config: Optional[RequestConfig] = None) -> Any:
        config = config or RequestConfig()
        url_with_params = append_query_params(url, config.params)
        headers = {HEADER_ACCEPT: "application/json", **(config.headers or {})}

        try:
            response = await self._send(url_with_params, headers, config.timeout)

            if not response.is_success:
                raise NeopleApiError(
                    response.status_code,
                    f"HTTP {response.status_code}: {response.reason_phrase}",
                    self._read_body(response),
                )

            try:
                return response.json()
            except ValueError as e:
                raise NeopleApiError(
                    0, f"Invalid JSON response: {e}", response.text
                ) from e
        except NeopleApiError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise NeopleApiError(0, TIMEOUT_MESSAGE, e) from e
        except httpx.TransportError as e:
            if _is_cors_error(e):
                raise NeopleApiError(0, CORS_MESSAGE, e) from e
            raise NeopleApiError(0, str(e) or "Network error occurred.", e) from e
        except httpx.HTTPError as e:
            raise NeopleApiError(0, str(e) or "Network error occurred.", e) from e

    async def _send(
        self, url: str, headers: dict[str, str], timeout: Optional[float]
    ) -> httpx.Response:
        if self._client is not None:
            return await asyncio.wait_for(
                self._client.get(url, headers=headers), timeout
            )

        async with httpx.AsyncClient(**get_httpx_client_kwargs()) as client:
            return await asyncio.wait_for(client.get(url, headers=headers), timeout)

    @staticmethod
    def _read_body(response: httpx.Response) -> Optional[str]:
        try:
            return response.text
        except (httpx.HTTPError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read error body: {e}")
            return None
