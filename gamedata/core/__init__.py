"""
Core module - exceptions shared across the data layer.
"""
from gamedata.core.exceptions import (
    GameDataError,
    UnsupportedGameModelError,
    GameModelSerializationError,
)

__all__ = [
    "GameDataError",
    "UnsupportedGameModelError",
    "GameModelSerializationError",
]
