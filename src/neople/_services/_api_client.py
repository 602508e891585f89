from logging import getLogger
from typing import Any, Mapping, Optional

from .._config import Config
from .._utils import RequestSpec, with_api_key
from .._utils.constants import API_KEY_PARAM, HEADER_AUTHORIZATION
from ..adapters import HttpAdapter, HttpxAdapter, RequestConfig
from ..models.errors import NeopleApiError


class ApiClient:
    """Issues GET requests against the Neople Open API.

    Holds the credential, the base URL and the transport adapter. Every
    endpoint of the domain services goes through :meth:`request`, so URL
    assembly, authentication and error propagation are the same everywhere.
    """

    def __init__(
        self, config: Config, http_adapter: Optional[HttpAdapter] = None
    ) -> None:
        self._logger = getLogger("neople")
        self._config = config
        self._http_adapter = http_adapter or HttpxAdapter()

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def http_adapter(self) -> HttpAdapter:
        return self._http_adapter

    @property
    def auth_headers(self) -> dict[str, str]:
        header = f"Bearer {self._config.api_key}"
        return {HEADER_AUTHORIZATION: header}

    def build_url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    def build_params(self, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """Caller parameters in insertion order, followed by the API key."""
        return with_api_key(params, self._config.api_key)

    async def request(
        self, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Send a GET request for ``path`` and return the decoded JSON body.

        Args:
            path: Endpoint path starting with a slash, e.g. ``/df/servers``.
            params: Query parameters. ``None`` values are dropped; the API key
                is always appended last.

        Returns:
            Any: The response payload, unchanged.

        Raises:
            NeopleApiError: If the transport or the API reports a failure.
        """
        url = self.build_url(path)
        config = RequestConfig(
            headers=self.auth_headers,
            params=self.build_params(params),
        )

        self._logger.debug(f"Request: GET {url}")
        self._logger.debug(
            f"PARAMS: {[key for key in config.params or {} if key != API_KEY_PARAM]}"
        )

        try:
            return await self._http_adapter.get(url, config)
        except NeopleApiError as e:
            self._logger.debug(f"Request failed: GET {url} -> {e.status} {e.message}")
            raise

    async def request_spec(self, spec: RequestSpec) -> Any:
        return await self.request(spec.endpoint, spec.params)
