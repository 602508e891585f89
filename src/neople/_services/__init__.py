from ._api_client import ApiClient
from .cyphers_service import CyphersService
from .dungeon_fighter_service import DungeonFighterService

__all__ = [
    "ApiClient",
    "CyphersService",
    "DungeonFighterService",
]
