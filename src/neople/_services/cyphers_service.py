from typing import Any

from .._endpoints import Ids, Params
from .._endpoints import cyphers as endpoints
from .._endpoints.cyphers import RankingType, TsjType
from ._api_client import ApiClient


class CyphersService:
    """Service for the Cyphers endpoints (``/cy/...``)."""

    def __init__(self, api_client: ApiClient) -> None:
        self._api_client = api_client

    async def search_player(self, nickname: str, params: Params = None) -> Any:
        """Search players by nickname.

        Args:
            nickname (str): The nickname to look for.
            params (Optional[Mapping[str, Any]]): ``wordType`` (``"match"`` or
                ``"full"``) and ``limit``.

        Returns:
            Any: An object with a ``rows`` list of players.

        Examples:
            ```python
            from neople import Neople

            neople = Neople()

            players = await neople.cyphers.search_player("nickname", {"wordType": "full"})
            ```
        """
        return await self._api_client.request_spec(endpoints.players(nickname, params))

    async def get_player(self, player_id: str) -> Any:
        return await self._api_client.request_spec(endpoints.player(player_id))

    async def get_player_matches(self, player_id: str, params: Params = None) -> Any:
        """Retrieve the match history of a player.

        Args:
            player_id (str): The player id.
            params (Optional[Mapping[str, Any]]): ``gameTypeId``, ``startDate``,
                ``endDate``, ``limit`` or ``next``.
        """
        return await self._api_client.request_spec(
            endpoints.player_matches(player_id, params)
        )

    async def get_player_battle_items(self, player_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.player_battle_items(player_id)
        )

    async def get_match(self, match_id: str) -> Any:
        return await self._api_client.request_spec(endpoints.match(match_id))

    async def get_overall_ranking(self, params: Params = None) -> Any:
        return await self._api_client.request_spec(endpoints.overall_ranking(params))

    async def get_character_ranking(
        self, character_id: str, ranking_type: RankingType, params: Params = None
    ) -> Any:
        """Retrieve the ranking of a cypher.

        Args:
            character_id (str): The cypher id.
            ranking_type (RankingType): One of ``winCount``, ``winRate``,
                ``killCount``, ``assistCount`` or ``exp``.
            params (Optional[Mapping[str, Any]]): ``playerId``, ``offset``
                and ``limit``.
        """
        return await self._api_client.request_spec(
            endpoints.character_ranking(character_id, ranking_type, params)
        )

    async def get_tsj_ranking(self, tsj_type: TsjType, params: Params = None) -> Any:
        return await self._api_client.request_spec(
            endpoints.tsj_ranking(tsj_type, params)
        )

    async def search_items(self, params: Params = None) -> Any:
        return await self._api_client.request_spec(endpoints.battle_items(params))

    async def get_item(self, item_id: str) -> Any:
        return await self._api_client.request_spec(endpoints.battle_item(item_id))

    async def get_multi_items(self, item_ids: Ids) -> Any:
        return await self._api_client.request_spec(
            endpoints.multi_battle_items(item_ids)
        )

    async def get_cyphers_info(self, params: Params = None) -> Any:
        return await self._api_client.request_spec(endpoints.characters(params))

    async def get_recommend_items(self, character_id: str) -> Any:
        return await self._api_client.request_spec(
            endpoints.recommend_items(character_id)
        )
