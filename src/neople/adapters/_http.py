from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@dataclass
class RequestConfig:
    """Per-call transport options.

    Attributes:
        headers: Extra request headers.
        timeout: Seconds to wait for the whole request before giving up.
        params: Query parameters, appended to the URL by the adapter.
    """

    headers: Optional[dict[str, str]] = None
    timeout: Optional[float] = None
    params: Optional[Mapping[str, Any]] = None


@runtime_checkable
class HttpAdapter(Protocol):
    """Transport used by :class:`~neople.ApiClient` to perform GET requests.

    Implementations append ``config.params`` to ``url``, return the decoded
    JSON body and raise :class:`~neople.NeopleApiError` for every transport
    or HTTP failure.
    """

    async def get(self, url: str, config: Optional[RequestConfig] = None) -> Any: ...
