from ._logs import setup_logging
from ._query_params import (
    append_query_params,
    build_query_string,
    encode_params,
    parse_query_params,
    with_api_key,
)
from ._request_spec import RequestSpec

__all__ = [
    "RequestSpec",
    "append_query_params",
    "build_query_string",
    "encode_params",
    "parse_query_params",
    "setup_logging",
    "with_api_key",
]
