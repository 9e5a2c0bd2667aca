"""
gamedata - typed MongoDB access for game model records.
"""
from gamedata.core.exceptions import (
    GameDataError,
    GameModelSerializationError,
    UnsupportedGameModelError,
)
from gamedata.database.collections import (
    CollectionNames,
    CollectionRegistry,
    get_collection_registry,
)
from gamedata.models.game_model import GameModel, game_collection, get_game_collection
from gamedata.services.mongo_service import MongoService

__all__ = [
    "GameDataError",
    "GameModelSerializationError",
    "UnsupportedGameModelError",
    "CollectionNames",
    "CollectionRegistry",
    "get_collection_registry",
    "GameModel",
    "game_collection",
    "get_game_collection",
    "MongoService",
]
