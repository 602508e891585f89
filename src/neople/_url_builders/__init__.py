from ._base_url_builder import UrlBuilder
from .cyphers_url_builder import CyphersUrlBuilder
from .dungeon_fighter_url_builder import DungeonFighterUrlBuilder

__all__ = [
    "CyphersUrlBuilder",
    "DungeonFighterUrlBuilder",
    "UrlBuilder",
]
