from ._aiohttp_adapter import AiohttpAdapter
from ._http import HttpAdapter, RequestConfig
from ._httpx_adapter import HttpxAdapter
from ._requests_adapter import RequestsAdapter

__all__ = [
    "AiohttpAdapter",
    "HttpAdapter",
    "HttpxAdapter",
    "RequestConfig",
    "RequestsAdapter",
]
