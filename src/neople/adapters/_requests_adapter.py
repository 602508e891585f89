import asyncio
import json
from typing import Any, Optional

import requests

from .._utils import append_query_params
from .._utils.constants import HEADER_ACCEPT, NO_RESPONSE_MESSAGE, TIMEOUT_MESSAGE
from ..models.errors import NeopleApiError
from ._http import RequestConfig


def _response_data(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _http_error(response: requests.Response) -> NeopleApiError:
    return NeopleApiError(
        response.status_code,
        f"HTTP {response.status_code}: {response.reason}",
        _response_data(response),
    )


class RequestsAdapter:
    """Adapter over a :class:`requests.Session`.

    The blocking call runs in a worker thread so it can be awaited like the
    other adapters. Without an injected session a new one is used per call.

    Examples:
        ```python
        import requests
        from neople import Neople, RequestsAdapter

        session = requests.Session()
        session.headers["User-Agent"] = "my-app/1.0"
        neople = Neople(api_key="your-api-key", http_adapter=RequestsAdapter(session))
        ```
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session

    async def get(self, url: str, config: Optional[RequestConfig] = None) -> Any:
        config = config or RequestConfig()

        try:
            response = await asyncio.to_thread(self._send, url, config)
        except requests.Timeout as e:
            raise NeopleApiError(0, TIMEOUT_MESSAGE, e) from e
        except requests.RequestException as e:
            if e.response is not None:
                raise _http_error(e.response) from e
            if e.request is not None:
                raise NeopleApiError(0, NO_RESPONSE_MESSAGE, e.request) from e
            raise NeopleApiError(0, str(e) or "Unknown requests error", e) from e

        if not 200 <= response.status_code < 300:
            raise _http_error(response)

        try:
            return json.loads(response.content)
        except ValueError as e:
            raise NeopleApiError(0, f"Invalid JSON response: {e}", response.text) from e

    def _send(self, url: str, config: RequestConfig) -> requests.Response:
        url_with_params = append_query_params(url, config.params)
        headers = {HEADER_ACCEPT: "application/json", **(config.headers or {})}

        if self._session is not None:
            return self._session.get(
                url_with_params, headers=headers, timeout=config.timeout
            )

        with requests.Session() as session:
            return session.get(url_with_params, headers=headers, timeout=config.timeout)
