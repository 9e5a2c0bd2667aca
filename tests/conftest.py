"""
Global test fixtures for gamedata.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock)
- Dummy game records
- Services bound to the dummy game models
"""

from typing import Generator
from uuid import UUID, uuid4

import mongomock
import pytest

from gamedata.services.mongo_service import MongoService

from tests.dummy_models import (
    DummyGameModel,
    InvalidNameDummyGameModel,
    MissingBindingDummyGameModel,
)


TEST_DB_NAME = "game_unit_testing"


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client() -> Generator:
    """
    Create a mock MongoDB client using mongomock.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def mock_game_db(mock_mongo_client):
    """Provide a mock game database, dropped after the test."""
    db = mock_mongo_client[TEST_DB_NAME]
    yield db
    mock_mongo_client.drop_database(TEST_DB_NAME)


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def duel_id() -> UUID:
    return uuid4()


@pytest.fixture
def valid_duels(duel_id) -> DummyGameModel:
    """A duels record with two owned tanks."""
    return DummyGameModel(
        uuid=duel_id,
        name="duels",
        kills=0,
        owned_tanks=["Merkava 4", "Merkava 3"],
    )


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def valid_service(mock_game_db) -> MongoService[DummyGameModel]:
    """Service bound to the supported ``game`` collection."""
    return MongoService(mock_game_db, DummyGameModel)


@pytest.fixture
def invalid_name_service(mock_game_db) -> MongoService[InvalidNameDummyGameModel]:
    return MongoService(mock_game_db, InvalidNameDummyGameModel)


@pytest.fixture
def missing_binding_service(mock_game_db) -> MongoService[MissingBindingDummyGameModel]:
    return MongoService(mock_game_db, MissingBindingDummyGameModel)
