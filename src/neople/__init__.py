from ._config import Config
from ._neople import Neople
from ._services import ApiClient, CyphersService, DungeonFighterService
from ._url_builders import CyphersUrlBuilder, DungeonFighterUrlBuilder, UrlBuilder
from ._utils import (
    RequestSpec,
    append_query_params,
    build_query_string,
    parse_query_params,
)
from .adapters import (
    AiohttpAdapter,
    HttpAdapter,
    HttpxAdapter,
    RequestConfig,
    RequestsAdapter,
)
from .models import NeopleApiError

__all__ = [
    "AiohttpAdapter",
    "ApiClient",
    "Config",
    "CyphersService",
    "CyphersUrlBuilder",
    "DungeonFighterService",
    "DungeonFighterUrlBuilder",
    "HttpAdapter",
    "HttpxAdapter",
    "Neople",
    "NeopleApiError",
    "RequestConfig",
    "RequestSpec",
    "RequestsAdapter",
    "UrlBuilder",
    "append_query_params",
    "build_query_string",
    "parse_query_params",
]
