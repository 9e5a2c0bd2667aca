"""
Collection names and the allow-list of collections game models may target.
"""
import threading
from typing import Iterable, Optional


class CollectionNames:
    """Collection names in the game database."""
    GAME = "game"                # Game sessions
    GAME_STATS = "game-stats"    # Per-player game statistics
    GAME_DATA = "game-data"      # Pre game load data (min_players, max_players, ...)


# Manifest of declared collections; only enabled ones are allowed
COLLECTIONS_MANIFEST = [
    {
        "name": CollectionNames.GAME,
        "purpose": "Game session records",
        "enabled": True,
    },
    {
        "name": CollectionNames.GAME_STATS,
        "purpose": "Player statistics per game",
        "enabled": True,
    },
    {
        "name": CollectionNames.GAME_DATA,
        "purpose": "Pre game load data",
        "enabled": False,
    },
]


class CollectionRegistry:
    """
    Fixed allow-list of collection names.

    The list is frozen at construction and is the single source of truth
    for which collections a game model may be bound to.
    """

    def __init__(self, allowed: Iterable[str]):
        self._allowed = tuple(allowed)

    @property
    def allowed_collections(self) -> tuple[str, ...]:
        return self._allowed

    def is_supported(self, collection_name: str) -> bool:
        """Exact, case-sensitive membership check."""
        return any(name == collection_name for name in self._allowed)

    def __repr__(self) -> str:
        return f"CollectionRegistry({list(self._allowed)!r})"


# Global registry instance, built on first use
_registry: Optional[CollectionRegistry] = None
_registry_lock = threading.Lock()


def get_collection_registry() -> CollectionRegistry:
    """Get the process-wide registry, built from the manifest on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = CollectionRegistry(
                    entry["name"] for entry in COLLECTIONS_MANIFEST if entry["enabled"]
                )
    return _registry
