"""Path templates and parameters for every Neople Open API endpoint.

Both the request-issuing services and the URL builders resolve their
endpoints here, which keeps the URLs they produce identical.
"""

from typing import Any, Mapping, Optional, Sequence, Union

Params = Optional[Mapping[str, Any]]
Ids = Union[str, Sequence[str]]


def merge_params(first: Mapping[str, Any], params: Params) -> dict[str, Any]:
    return {**first, **(params or {})}


def join_ids(ids: Ids) -> str:
    if isinstance(ids, str):
        return ids
    return ",".join(str(i) for i in ids)
