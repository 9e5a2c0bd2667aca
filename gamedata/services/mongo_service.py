"""
Generic MongoDB service for game model records.
"""
import asyncio
import logging
from typing import Any, Generic, Optional, TypeVar
from uuid import UUID

from bson import json_util
from bson.errors import BSONError
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from pymongo.collection import Collection
from pymongo.database import Database

from gamedata.core.exceptions import (
    GameModelSerializationError,
    UnsupportedGameModelError,
)
from gamedata.database.collections import CollectionRegistry, get_collection_registry
from gamedata.models.game_model import GameModel, get_game_collection

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=GameModel)


class MongoService(Generic[T]):
    """
    CRUD operations on the collection a game model is bound to.

    Every operation has a blocking ``*_sync`` form and an async form that
    runs the blocking form on a worker thread. Missing records are not
    errors: ``get`` returns None, ``update`` and ``remove`` do nothing.
    """

    def __init__(
        self,
        database: Database,
        model_type: type[T],
        registry: Optional[CollectionRegistry] = None,
    ):
        """Initialize with a database handle and the model type served."""
        self._database = database
        self._model_type = model_type
        self._registry = registry or get_collection_registry()

    @property
    def database(self) -> Database:
        return self._database

    @property
    def model_type(self) -> type[T]:
        return self._model_type

    # ==================== Collection Resolution ====================

    @property
    def collection_name(self) -> str:
        """
        Validated collection name of the model type.

        Raises:
            UnsupportedGameModelError: If the binding is missing, empty or
                not in the registry
        """
        name = get_game_collection(self._model_type)
        if name is None:
            logger.error(f"{self._model_type.__name__} has no game_collection binding")
            raise UnsupportedGameModelError(
                self._model_type, "missing game_collection binding"
            )

        if not name or not self._registry.is_supported(name):
            logger.error(
                f"{self._model_type.__name__} is bound to unsupported collection '{name}'"
            )
            raise UnsupportedGameModelError(
                self._model_type, f"collection name '{name}' unsupported"
            )

        return name

    def _get_collection(self) -> Collection:
        return self._database[self.collection_name]

    @staticmethod
    def _id_filter(record_id: UUID) -> dict[str, str]:
        return {"_id": str(record_id)}

    # ==================== Async Operations ====================

    async def insert(self, data: T) -> None:
        """Insert a record on a worker thread."""
        await asyncio.to_thread(self.insert_sync, data)

    async def update(self, record_id: UUID, data: T) -> None:
        """Replace the record with ``record_id`` on a worker thread."""
        await asyncio.to_thread(self.update_sync, record_id, data)

    async def remove(self, record_id: UUID) -> None:
        """Remove the record with ``record_id`` on a worker thread."""
        await asyncio.to_thread(self.remove_sync, record_id)

    async def get(
        self, record_id: UUID, model_type: Optional[type[T]] = None
    ) -> Optional[T]:
        """Fetch a record on a worker thread, None if not found."""
        return await asyncio.to_thread(self.get_sync, record_id, model_type)

    async def increment_field(self, record_id: UUID, field_name: str, amount: int) -> None:
        """Increment a numeric field on a worker thread."""
        await asyncio.to_thread(self.increment_field_sync, record_id, field_name, amount)

    async def add_to_collection(self, record_id: UUID, field_name: str, item: Any) -> None:
        """Append an item to an array field on a worker thread."""
        await asyncio.to_thread(self.add_to_collection_sync, record_id, field_name, item)

    async def remove_from_collection(self, record_id: UUID, field_name: str, item: Any) -> None:
        """Remove an item from an array field on a worker thread."""
        await asyncio.to_thread(self.remove_from_collection_sync, record_id, field_name, item)

    # ==================== Blocking Operations ====================

    def insert_sync(self, data: T) -> None:
        """
        Insert a record as a new document.

        Args:
            data: Record to insert

        Raises:
            UnsupportedGameModelError: If the model's collection is invalid
            GameModelSerializationError: If the record cannot be serialized
        """
        collection = self._get_collection()
        doc = self._to_document(data)
        collection.insert_one(doc)
        logger.debug(f"Inserted {data.uuid} into {collection.name}")

    def update_sync(self, record_id: UUID, data: T) -> None:
        """
        Replace the document matching ``record_id`` with ``data``.

        Does nothing if no document matches.
        """
        collection = self._get_collection()
        doc = self._to_document(data)
        result = collection.replace_one(self._id_filter(record_id), doc)
        logger.debug(
            f"Replaced {record_id} in {collection.name} (matched={result.matched_count})"
        )

    def remove_sync(self, record_id: UUID) -> None:
        """Delete the document matching ``record_id``, if any."""
        collection = self._get_collection()
        result = collection.delete_one(self._id_filter(record_id))
        logger.debug(
            f"Removed {record_id} from {collection.name} (deleted={result.deleted_count})"
        )

    def get_sync(
        self, record_id: UUID, model_type: Optional[type[T]] = None
    ) -> Optional[T]:
        """
        Fetch a record by identifier.

        Args:
            record_id: Identifier of the record
            model_type: Type to deserialize into, defaults to the service's type

        Returns:
            The record, or None if no document matches

        Raises:
            GameModelSerializationError: If the stored document does not fit
                ``model_type``
        """
        collection = self._get_collection()
        doc = collection.find_one(self._id_filter(record_id))
        if doc is None:
            return None
        return self._from_document(doc, model_type or self._model_type)

    def increment_field_sync(self, record_id: UUID, field_name: str, amount: int) -> None:
        """Atomically add ``amount`` to a numeric field."""
        collection = self._get_collection()
        collection.update_one(self._id_filter(record_id), {"$inc": {field_name: amount}})
        logger.debug(f"Incremented {field_name} of {record_id} in {collection.name} by {amount}")

    def add_to_collection_sync(self, record_id: UUID, field_name: str, item: Any) -> None:
        """Append ``item`` to an array field."""
        collection = self._get_collection()
        collection.update_one(self._id_filter(record_id), {"$push": {field_name: item}})
        logger.debug(f"Pushed to {field_name} of {record_id} in {collection.name}")

    def remove_from_collection_sync(self, record_id: UUID, field_name: str, item: Any) -> None:
        """Remove every occurrence of ``item`` from an array field."""
        collection = self._get_collection()
        collection.update_one(self._id_filter(record_id), {"$pull": {field_name: item}})
        logger.debug(f"Pulled from {field_name} of {record_id} in {collection.name}")

    # ==================== Conversion ====================

    @staticmethod
    def _to_document(data: GameModel) -> dict[str, Any]:
        try:
            json_string = data.model_dump_json(by_alias=True)
            return json_util.loads(json_string)
        except (PydanticSerializationError, BSONError, ValueError, TypeError) as e:
            raise GameModelSerializationError(
                f"Failed to serialize {type(data).__name__} to a document"
            ) from e

    @staticmethod
    def _from_document(doc: dict[str, Any], model_type: type[T]) -> T:
        try:
            json_string = json_util.dumps(doc)
            return model_type.model_validate_json(json_string)
        except (ValidationError, BSONError, ValueError, TypeError) as e:
            raise GameModelSerializationError(
                f"Failed to deserialize document into {model_type.__name__}"
            ) from e
