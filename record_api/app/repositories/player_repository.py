"""
Player repository: a read-only mock store kept in memory.

The store is a plain list scanned linearly on every lookup, which is
fine for the handful of seeded players it holds.  A lock guards the
list so that concurrent requests observe a consistent snapshot.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..schemas.player import Player

logger = logging.getLogger(__name__)


class PlayerRepository(ABC):
    """Repository interface for player lookup."""

    @abstractmethod
    def find_by_id(self, player_id: str) -> Optional[Player]:
        """Return the player whose id equals ``player_id`` or ``None``."""

    @abstractmethod
    def find_all(self) -> List[Player]:
        """Return every player in insertion order."""


class InMemoryPlayerRepository(PlayerRepository):
    def __init__(self, players: Optional[Iterable[Player]] = None) -> None:
        self._players: List[Player] = list(players or [])
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls, count: int = 5) -> "InMemoryPlayerRepository":
        """Create a store holding ``count`` random players with ids ``000``, ``001``, ..."""
        players = [Player.random(id="%03d" % i) for i in range(count)]
        logger.info("Seeded %d mock players", len(players))
        return cls(players)

    def find_by_id(self, player_id: str) -> Optional[Player]:
        with self._lock:
            for player in self._players:
                if player.id == player_id:
                    return player
        logger.debug("Player %s not found", player_id)
        return None

    def find_all(self) -> List[Player]:
        with self._lock:
            return list(self._players)
