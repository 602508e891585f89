from .._endpoints import Ids, Params
from .._endpoints import cyphers as endpoints
from .._endpoints.cyphers import RankingType, TsjType
from ._base_url_builder import UrlBuilder


class CyphersUrlBuilder(UrlBuilder):
    """URL counterpart of :class:`~neople.CyphersService`."""

    def search_player(self, nickname: str, params: Params = None) -> str:
        return self.build_spec_url(endpoints.players(nickname, params))

    def get_player(self, player_id: str) -> str:
        return self.build_spec_url(endpoints.player(player_id))

    def get_player_matches(self, player_id: str, params: Params = None) -> str:
        return self.build_spec_url(endpoints.player_matches(player_id, params))

    def get_player_battle_items(self, player_id: str) -> str:
        return self.build_spec_url(endpoints.player_battle_items(player_id))

    def get_match(self, match_id: str) -> str:
        return self.build_spec_url(endpoints.match(match_id))

    def get_overall_ranking(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.overall_ranking(params))

    def get_character_ranking(
        self, character_id: str, ranking_type: RankingType, params: Params = None
    ) -> str:
        return self.build_spec_url(
            endpoints.character_ranking(character_id, ranking_type, params)
        )

    def get_tsj_ranking(self, tsj_type: TsjType, params: Params = None) -> str:
        return self.build_spec_url(endpoints.tsj_ranking(tsj_type, params))

    def search_items(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.battle_items(params))

    def get_item(self, item_id: str) -> str:
        return self.build_spec_url(endpoints.battle_item(item_id))

    def get_multi_items(self, item_ids: Ids) -> str:
        return self.build_spec_url(endpoints.multi_battle_items(item_ids))

    def get_cyphers_info(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.characters(params))

    def get_recommend_items(self, character_id: str) -> str:
        return self.build_spec_url(endpoints.recommend_items(character_id))
