from os import environ as env
from typing import Optional

from dotenv import load_dotenv

from ._config import Config
from ._services import ApiClient, CyphersService, DungeonFighterService
from ._url_builders import CyphersUrlBuilder, DungeonFighterUrlBuilder
from ._utils import setup_logging
from ._utils.constants import DEFAULT_BASE_URL, ENV_API_KEY, ENV_BASE_URL
from .adapters import HttpAdapter

load_dotenv()


class Neople:
    """
    Entry point to the Neople Open API: Dungeon Fighter and Cyphers.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        http_adapter: Optional[HttpAdapter] = None,
        base_url: Optional[str] = None,
        debug: bool = False,
    ) -> None:
        """
        Initialize the Neople client.

        Args:
            api_key (Optional[str]): The Neople Open API key. If not provided, it
                will be read from the `NEOPLE_API_KEY` environment variable.
            http_adapter (Optional[HttpAdapter]): The transport used for every
                request. Defaults to an `HttpxAdapter`.
            base_url (Optional[str]): The API origin. If not provided, it will be
                read from `NEOPLE_API_URL`, falling back to https://api.neople.co.kr.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        api_key_value = api_key or env.get(ENV_API_KEY)
        base_url_value = base_url or env.get(ENV_BASE_URL) or DEFAULT_BASE_URL

        self._config = Config(
            # Config raises a ValidationError when no key was found
            api_key=api_key_value,  # type: ignore
            base_url=base_url_value,
        )

        setup_logging(debug)

        self._api_client = ApiClient(self._config, http_adapter)
        self._df = DungeonFighterService(self._api_client)
        self._cyphers = CyphersService(self._api_client)
        self._df_urls = DungeonFighterUrlBuilder(
            self._config.api_key, self._config.base_url
        )
        self._cyphers_urls = CyphersUrlBuilder(
            self._config.api_key, self._config.base_url
        )

    @property
    def api_client(self) -> ApiClient:
        """
        Low-level client for issuing requests against arbitrary API paths.
        """
        return self._api_client

    @property
    def df(self) -> DungeonFighterService:
        """
        Dungeon Fighter Online: characters, equipment, auction house, avatar
        market, items and skills.
        """
        return self._df

    @property
    def cyphers(self) -> CyphersService:
        """
        Cyphers: players, matches, rankings and battle items.
        """
        return self._cyphers

    @property
    def df_urls(self) -> DungeonFighterUrlBuilder:
        return self._df_urls

    @property
    def cyphers_urls(self) -> CyphersUrlBuilder:
        return self._cyphers_urls
