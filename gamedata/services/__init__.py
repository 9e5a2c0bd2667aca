"""
Service layer for game record persistence.
"""
from gamedata.services.mongo_service import MongoService

__all__ = [
    "MongoService",
]
