"""Business logic for players (read-only lookups)."""

from typing import List, Optional

from record_api.app.repositories.player_repository import PlayerRepository
from record_api.app.schemas.player import Player


class PlayerService:
    def __init__(self, repository: PlayerRepository) -> None:
        self.repository = repository

    async def get_by_id(self, player_id: str) -> Optional[Player]:
        return self.repository.find_by_id(player_id)

    async def get_all(self) -> List[Player]:
        return self.repository.find_all()
