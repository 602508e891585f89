from typing import Optional, Union

from .._utils import RequestSpec
from . import Ids, Params, join_ids, merge_params


def servers() -> RequestSpec:
    return RequestSpec(endpoint="/df/servers")


def jobs() -> RequestSpec:
    return RequestSpec(endpoint="/df/jobs")


def search_character(
    character_name: str, server_id: str = "all", params: Params = None
) -> RequestSpec:
    return RequestSpec(
        endpoint=f"/df/servers/{server_id}/characters",
        params=merge_params({"characterName": character_name}, params),
    )


def character(server_id: str, character_id: str, suffix: str = "") -> RequestSpec:
    return RequestSpec(
        endpoint=f"/df/servers/{server_id}/characters/{character_id}{suffix}"
    )


def character_timeline(
    server_id: str, character_id: str, params: Params = None
) -> RequestSpec:
    return RequestSpec(
        endpoint=f"/df/servers/{server_id}/characters/{character_id}/timeline",
        params=dict(params or {}),
    )


def characters_by_fame(server_id: str = "all", params: Params = None) -> RequestSpec:
    return RequestSpec(
        endpoint=f"/df/servers/{server_id}/characters-fame",
        params=dict(params or {}),
    )


def auction(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/df/auction", params=dict(params or {}))


def auction_sold(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/df/auction-sold", params=dict(params or {}))


def auction_item(auction_no: Union[str, int]) -> RequestSpec:
    return RequestSpec(endpoint=f"/df/auction/{auction_no}")


def avatar_market_sale(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/df/avatar-market/sale", params=dict(params or {}))


def avatar_market_sold(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/df/avatar-market/sold", params=dict(params or {}))


def avatar_market_item(goods_no: Union[str, int]) -> RequestSpec:
    return RequestSpec(endpoint=f"/df/avatar-market/sale/{goods_no}")


def avatar_market_sold_item(goods_no: Union[str, int]) -> RequestSpec:
    return RequestSpec(endpoint=f"/df/avatar-market/sold/{goods_no}")


def avatar_market_hashtags() -> RequestSpec:
    return RequestSpec(endpoint="/df/avatar-market/hashtag")


def items(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/df/items", params=dict(params or {}))


def item(item_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/df/items/{item_id}")


def item_shop(item_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/df/items/{item_id}/shop")


def multi_items(item_ids: Ids) -> RequestSpec:
    return RequestSpec(
        endpoint="/df/multi/items", params={"itemIds": join_ids(item_ids)}
    )


def item_hashtags() -> RequestSpec:
    return RequestSpec(endpoint="/df/item-hashtag")


def set_items(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/df/setitems", params=dict(params or {}))


def set_item(set_item_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/df/setitems/{set_item_id}")


def multi_set_items(set_item_ids: Ids) -> RequestSpec:
    return RequestSpec(
        endpoint="/df/multi/setitems", params={"setItemIds": join_ids(set_item_ids)}
    )


def skills_by_job(job_id: str, job_grow_id: Optional[str] = None) -> RequestSpec:
    params = {"jobGrowId": job_grow_id} if job_grow_id is not None else {}
    return RequestSpec(endpoint=f"/df/skills/{job_id}", params=params)


def skill(job_id: str, skill_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/df/skills/{job_id}/{skill_id}")


def multi_skills(job_id: str, skill_ids: Ids) -> RequestSpec:
    return RequestSpec(
        endpoint=f"/df/multi/skills/{job_id}", params={"skillIds": join_ids(skill_ids)}
    )
