import asyncio
import json
from typing import Any, Optional

import aiohttp
from yarl import URL

from .._utils import append_query_params
from .._utils._ssl_context import create_ssl_context
from .._utils.constants import HEADER_ACCEPT, TIMEOUT_MESSAGE
from ..models.errors import NeopleApiError
from ._http import RequestConfig


async def _read_body(response: aiohttp.ClientResponse) -> Any:
    try:
        text = await response.text()
    except (aiohttp.ClientError, UnicodeDecodeError):
        return None

    try:
        return json.loads(text)
    except ValueError:
        return text


class AiohttpAdapter:
    """Adapter over an :class:`aiohttp.ClientSession`.

    Without an injected session a new one is opened for every call.

    Examples:
        ```python
        import aiohttp
        from neople import AiohttpAdapter, Neople

        async with aiohttp.ClientSession() as session:
            neople = Neople(api_key="your-api-key", http_adapter=AiohttpAdapter(session))
            players = await neople.cyphers.search_player("nickname")
        ```
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None) -> None:
        self._session = session

    async def get(self, url: str, config: Optional[RequestConfig] = None) -> Any:
        config = config or RequestConfig()
        url_with_params = append_query_params(url, config.params)

        kwargs: dict[str, Any] = {
            "headers": {HEADER_ACCEPT: "application/json", **(config.headers or {})}
        }
        if config.timeout:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=config.timeout)

        try:
            if self._session is not None:
                return await self._fetch(self._session, url_with_params, kwargs)

            connector = aiohttp.TCPConnector(ssl=create_ssl_context())
            async with aiohttp.ClientSession(connector=connector) as session:
                return await self._fetch(session, url_with_params, kwargs)
        except NeopleApiError:
            raise
        except asyncio.TimeoutError as e:
            raise NeopleApiError(0, TIMEOUT_MESSAGE, e) from e
        except aiohttp.ClientResponseError as e:
            raise NeopleApiError(e.status, f"HTTP {e.status}: {e.message}", None) from e
        except (aiohttp.ClientConnectorError, aiohttp.ServerDisconnectedError) as e:
            raise NeopleApiError(0, f"Network Error: {e}", e) from e
        except aiohttp.ClientError as e:
            raise NeopleApiError(0, str(e) or "Unknown aiohttp error", e) from e

    async def _fetch(
        self, session: aiohttp.ClientSession, url: str, kwargs: dict[str, Any]
    ) -> Any:
        # encoded=True keeps the query exactly as append_query_params produced it
        async with session.get(URL(url, encoded=True), **kwargs) as response:
            if not 200 <= response.status < 300:
                raise NeopleApiError(
                    response.status,
                    f"HTTP {response.status}: {response.reason or ''}",
                    await _read_body(response),
                )

            try:
                return json.loads(await response.text())
            except ValueError as e:
                raise NeopleApiError(
                    0,
                    f"Invalid JSON response: {e}",
                    await response.text(errors="replace"),
                ) from e
