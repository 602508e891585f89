from typing import Optional, Union

from .._endpoints import Ids, Params
from .._endpoints import dungeon_fighter as endpoints
from ._base_url_builder import UrlBuilder


class DungeonFighterUrlBuilder(UrlBuilder):
    """URL counterpart of :class:`~neople.DungeonFighterService`.

    Examples:
        ```python
        from neople import DungeonFighterUrlBuilder

        urls = DungeonFighterUrlBuilder("your-api-key")
        url = urls.search_character("홍길동", "cain")
        ```
    """

    def get_servers(self) -> str:
        return self.build_spec_url(endpoints.servers())

    def get_jobs(self) -> str:
        return self.build_spec_url(endpoints.jobs())

    def search_character(
        self, character_name: str, server_id: str = "all", params: Params = None
    ) -> str:
        return self.build_spec_url(
            endpoints.search_character(character_name, server_id, params)
        )

    def get_character(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(endpoints.character(server_id, character_id))

    def get_character_status(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/status")
        )

    def get_character_equipment(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/equip/equipment")
        )

    def get_character_avatar(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/equip/avatar")
        )

    def get_character_creature(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/equip/creature")
        )

    def get_character_flag(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/equip/flag")
        )

    def get_character_talisman(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/equip/talisman")
        )

    def get_character_skill_style(self, server_id: str, character_id: str) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/skill/style")
        )

    def get_character_buff_skill_equipment(
        self, server_id: str, character_id: str
    ) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/skill/buff/equip/equipment")
        )

    def get_character_buff_skill_avatar(
        self, server_id: str, character_id: str
    ) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/skill/buff/equip/avatar")
        )

    def get_character_buff_skill_creature(
        self, server_id: str, character_id: str
    ) -> str:
        return self.build_spec_url(
            endpoints.character(server_id, character_id, "/skill/buff/equip/creature")
        )

    def get_character_timeline(
        self, server_id: str, character_id: str, params: Params = None
    ) -> str:
        return self.build_spec_url(
            endpoints.character_timeline(server_id, character_id, params)
        )

    def get_characters_by_fame(
        self, server_id: str = "all", params: Params = None
    ) -> str:
        return self.build_spec_url(endpoints.characters_by_fame(server_id, params))

    def search_auction(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.auction(params))

    def get_auction_sold(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.auction_sold(params))

    def get_auction_item(self, auction_no: Union[str, int]) -> str:
        return self.build_spec_url(endpoints.auction_item(auction_no))

    def get_avatar_market_sale(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.avatar_market_sale(params))

    def get_avatar_market_sold(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.avatar_market_sold(params))

    def get_avatar_market_item(self, goods_no: Union[str, int]) -> str:
        return self.build_spec_url(endpoints.avatar_market_item(goods_no))

    def get_avatar_market_sold_item(self, goods_no: Union[str, int]) -> str:
        return self.build_spec_url(endpoints.avatar_market_sold_item(goods_no))

    def get_avatar_market_hashtags(self) -> str:
        return self.build_spec_url(endpoints.avatar_market_hashtags())

    def search_items(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.items(params))

    def get_item(self, item_id: str) -> str:
        return self.build_spec_url(endpoints.item(item_id))

    def get_item_shop(self, item_id: str) -> str:
        return self.build_spec_url(endpoints.item_shop(item_id))

    def get_multi_items(self, item_ids: Ids) -> str:
        return self.build_spec_url(endpoints.multi_items(item_ids))

    def get_item_hashtags(self) -> str:
        return self.build_spec_url(endpoints.item_hashtags())

    def search_set_items(self, params: Params = None) -> str:
        return self.build_spec_url(endpoints.set_items(params))

    def get_set_item(self, set_item_id: str) -> str:
        return self.build_spec_url(endpoints.set_item(set_item_id))

    def get_multi_set_items(self, set_item_ids: Ids) -> str:
        return self.build_spec_url(endpoints.multi_set_items(set_item_ids))

    def get_skills_by_job(self, job_id: str, job_grow_id: Optional[str] = None) -> str:
        return self.build_spec_url(endpoints.skills_by_job(job_id, job_grow_id))

    def get_skill(self, job_id: str, skill_id: str) -> str:
        return self.build_spec_url(endpoints.skill(job_id, skill_id))

    def get_multi_skills(self, job_id: str, skill_ids: Ids) -> str:
        return self.build_spec_url(endpoints.multi_skills(job_id, skill_ids))
