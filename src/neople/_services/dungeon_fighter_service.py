from typing import Any, Optional, Union

from .._endpoints import Ids, Params
from .._endpoints import dungeon_fighter as endpoints
from ._api_client import ApiClient


class DungeonFighterService:
    """Service for the Dungeon Fighter Online endpoints (``/df/...``).

    Every method resolves a path and its query parameters and hands them to
    the shared :class:`ApiClient`; payloads are returned as the API sent them.
    Collection endpoints answer with an object holding a ``rows`` list.
    """

    def __init__(self, api_client: ApiClient) -> None:
        self._api_client = api_client

    async def get_servers(self) -> Any:
        """List the game servers."""
        return await self._api_client.request_spec(endpoints.servers())

    async def get_jobs(self) -> Any:
        """List the jobs and their growth paths."""
        return await self._api_client.request_spec(endpoints.jobs())

    async def search_character(
        self, character_name: str, server_id: str = "all", params: Params = None
    ) -> Any:
        """Search characters by name.

        Args:
            character_name (str): The name, or part of it, to look for.
            server_id (str): The server to search. Defaults to ``"all"``.
            params (Optional[Mapping[str, Any]]): Extra filters such as
                ``jobId``, ``jobGrowId``, ``wordType`` or ``limit``.

        Returns:
            Any: An object with a ``rows`` list of matching characters.

        Examples:
            ```python
            from neople import Neople

            neople = Neople()

            result = await neople.df.search_character("홍길동", "cain", {"limit": 10})
            ```
        """
        spec = endpoints.search_character(character_name, server_id, params)
        return await self._api_client.request_spec(spec)

    async def get_character(self, server_id: str, character_id: str) -> Any:
        """Retrieve the basic information of a character."""
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id)
        )

    async def get_character_status(self, server_id: str, character_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/status")
        )

    async def get_character_equipment(self, server_id: str, character_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/equip/equipment")
        )

    async def get_character_avatar(self, server_id: str, character_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/equip/avatar")
        )

    async def get_character_creature(self, server_id: str, character_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/equip/creature")
        )

    async def get_character_flag(self, server_id: str, character_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/equip/flag")
        )

    async def get_character_talisman(self, server_id: str, character_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/equip/talisman")
        )

    async def get_character_skill_style(
        self, server_id: str, character_id: str
    ) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/skill/style")
        )

    async def get_character_buff_skill_equipment(
        self, server_id: str, character_id: str
    ) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/skill/buff/equip/equipment")
        )

    async def get_character_buff_skill_avatar(
        self, server_id: str, character_id: str
    ) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/skill/buff/equip/avatar")
        )

    async def get_character_buff_skill_creature(
        self, server_id: str, character_id: str
    ) -> Any:
        return await self._api_client.request_spec(
            endpoints.character(server_id, character_id, "/skill/buff/equip/creature")
        )

    async def get_character_timeline(
        self, server_id: str, character_id: str, params: Params = None
    ) -> Any:
        """Retrieve the timeline of a character.

        Args:
            server_id (str): The server of the character.
            character_id (str): The character id.
            params (Optional[Mapping[str, Any]]): ``limit``, ``code``,
                ``startDate``, ``endDate`` or ``next``.
        """
        return await self._api_client.request_spec(
            endpoints.character_timeline(server_id, character_id, params)
        )

    async def get_characters_by_fame(
        self, server_id: str = "all", params: Params = None
    ) -> Any:
        return await self._api_client.request_spec(
            endpoints.characters_by_fame(server_id, params)
        )

    async def search_auction(self, params: Params = None) -> Any:
        """Search the items currently listed at the auction house.

        Args:
            params (Optional[Mapping[str, Any]]): Filters such as ``itemName``,
                ``itemId``, ``wordType``, ``limit`` or ``sort``.

        Returns:
            Any: An object with a ``rows`` list of listings.
        """
        return await self._api_client.request_spec(endpoints.auction(params))

    async def get_auction_sold(self, params: Params = None) -> Any:
        return await self._api_client.request_spec(endpoints.auction_sold(params))

    async def get_auction_item(self, auction_no: Union[str, int]) -> Any:
        return await self._api_client.request_spec(endpoints.auction_item(auction_no))

    async def get_avatar_market_sale(self, params: Params = None) -> Any:
        return await self._api_client.request_spec(
            endpoints.avatar_market_sale(params)
        )

    async def get_avatar_market_sold(self, params: Params = None) -> Any:
        return await self._api_client.request_spec(
            endpoints.avatar_market_sold(params)
        )

    async def get_avatar_market_item(self, goods_no: Union[str, int]) -> Any:
        return await self._api_client.request_spec(
            endpoints.avatar_market_item(goods_no)
        )

    async def get_avatar_market_sold_item(self, goods_no: Union[str, int]) -> Any:
        return await self._api_client.request_spec(
            endpoints.avatar_market_sold_item(goods_no)
        )

    async def get_avatar_market_hashtags(self) -> Any:
        return await self._api_client.request_spec(endpoints.avatar_market_hashtags())

    async def search_items(self, params: Params = None) -> Any:
        """Search items by name and filters (``itemName``, ``q``, ``limit``...)."""
        return await self._api_client.request_spec(endpoints.items(params))

    async def get_item(self, item_id: str) -> Any:
        return await self._api_client.request_spec(endpoints.item(item_id))

    async def get_item_shop(self, item_id: str) -> Any:
        return await self._api_client.request_spec(endpoints.item_shop(item_id))

    async def get_multi_items(self, item_ids: Ids) -> Any:
        """Retrieve several items at once.

        Args:
            item_ids (Union[str, Sequence[str]]): Comma separated ids, or a
                sequence of ids.
        """
        return await self._api_client.request_spec(endpoints.multi_items(item_ids))

    async def get_item_hashtags(self) -> Any:
        return await self._api_client.request_spec(endpoints.item_hashtags())

    async def search_set_items(self, params: Params = None) -> Any:
        return await self._api_client.request_spec(endpoints.set_items(params))

    async def get_set_item(self, set_item_id: str) -> Any:
        return await self._api_client.request_spec(endpoints.set_item(set_item_id))

    async def get_multi_set_items(self, set_item_ids: Ids) -> Any:
        return await self._api_client.request_spec(
            endpoints.multi_set_items(set_item_ids)
        )

    async def get_skills_by_job(
        self, job_id: str, job_grow_id: Optional[str] = None
    ) -> Any:
        return await self._api_client.request_spec(
            endpoints.skills_by_job(job_id, job_grow_id)
        )

    async def get_skill(self, job_id: str, skill_id: str) -> Any:
        return await self._api_client.request_spec(endpoints.skill(job_id, skill_id))

    async def get_multi_skills(self, job_id: str, skill_ids: Ids) -> Any:
        return await self._api_client.request_spec(
            endpoints.multi_skills(job_id, skill_ids)
        )
