from typing import Literal

from .._utils import RequestSpec
from . import Ids, Params, join_ids, merge_params

RankingType = Literal["winCount", "winRate", "killCount", "assistCount", "exp"]
TsjType = Literal["melee", "ranged"]


def players(nickname: str, params: Params = None) -> RequestSpec:
    return RequestSpec(
        endpoint="/cy/players", params=merge_params({"nickname": nickname}, params)
    )


def player(player_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/cy/players/{player_id}")


def player_matches(player_id: str, params: Params = None) -> RequestSpec:
    return RequestSpec(
        endpoint=f"/cy/players/{player_id}/matches", params=dict(params or {})
    )


def player_battle_items(player_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/cy/players/{player_id}/battleitems")


def match(match_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/cy/matches/{match_id}")


def overall_ranking(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/cy/ranking/ratingpoint", params=dict(params or {}))


def character_ranking(
    character_id: str, ranking_type: RankingType, params: Params = None
) -> RequestSpec:
    return RequestSpec(
        endpoint=f"/cy/ranking/characters/{character_id}/{ranking_type}",
        params=dict(params or {}),
    )


def tsj_ranking(tsj_type: TsjType, params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint=f"/cy/ranking/tsj/{tsj_type}", params=dict(params or {}))


def battle_items(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/cy/battleitems", params=dict(params or {}))


def battle_item(item_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/cy/battleitems/{item_id}")


def multi_battle_items(item_ids: Ids) -> RequestSpec:
    return RequestSpec(
        endpoint="/cy/multi/battleitems", params={"itemIds": join_ids(item_ids)}
    )


def characters(params: Params = None) -> RequestSpec:
    return RequestSpec(endpoint="/cy/characters", params=dict(params or {}))


def recommend_items(character_id: str) -> RequestSpec:
    return RequestSpec(endpoint=f"/cy/characters/{character_id}/items")
