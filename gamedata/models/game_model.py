"""
Base model and collection binding for game model records.
"""
from typing import Callable, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

GAME_COLLECTION_ATTR = "__game_collection__"

M = TypeVar("M", bound=type)


class GameModel(BaseModel):
    """
    Base document model for records stored by ``MongoService``.

    The identifier is persisted as text under MongoDB's ``_id`` field.
    """
    model_config = ConfigDict(populate_by_name=True)

    uuid: UUID = Field(..., alias="_id", description="Record identifier")


def game_collection(name: str) -> Callable[[M], M]:
    """
    Bind a game model class to the collection it is stored in.

    Usage:
        @game_collection(CollectionNames.GAME)
        class Duel(GameModel):
            ...
    """
    def decorator(cls: M) -> M:
        setattr(cls, GAME_COLLECTION_ATTR, name)
        return cls
    return decorator


def get_game_collection(model_type: type) -> Optional[str]:
    """
    Return the collection name bound to ``model_type``, or None.

    Only the class's own binding counts; subclasses must declare theirs.
    """
    return vars(model_type).get(GAME_COLLECTION_ATTR)
