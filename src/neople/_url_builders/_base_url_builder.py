from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from .._utils import RequestSpec, append_query_params, with_api_key
from .._utils.constants import DEFAULT_BASE_URL

B = TypeVar("B", bound="UrlBuilder")


class UrlBuilder:
    """Builds request URLs without sending them.

    For callers that bring their own HTTP stack. The URLs match, byte for
    byte, what :class:`~neople.ApiClient` sends through an adapter for the
    same credential, path and parameters.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self._api_key = api_key
        self._base_url = base_url

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return append_query_params(
            f"{self._base_url}{path}", with_api_key(params, self._api_key)
        )

    def build_spec_url(self, spec: RequestSpec) -> str:
        return self.build_url(spec.endpoint, spec.params)

    def batch(self: B, builders: Iterable[Callable[[B], str]]) -> list[str]:
        """Apply each builder function to this instance and collect the URLs.

        Examples:
            ```python
            urls = builder.batch(
                [
                    lambda b: b.get_character("cain", "char-1"),
                    lambda b: b.get_character_status("cain", "char-1"),
                ]
            )
            ```
        """
        return [build(self) for build in builders]
