"""
Pydantic models for game records.
"""
from gamedata.models.game_model import (
    GameModel,
    game_collection,
    get_game_collection,
)

__all__ = [
    "GameModel",
    "game_collection",
    "get_game_collection",
]
