"""Player endpoints: lookup by id and listing of the mock store."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from record_api.app.schemas.player import Player
from record_api.app.services.player_service import PlayerService
from record_api.app.api.deps import get_player_service

router = APIRouter()


@router.get("/player/{player_id}", response_model=Player)
async def get_player(
    player_id: str,
    service: PlayerService = Depends(get_player_service),
) -> Player:
    """Return a single player or 404 if the id is unknown."""
    player = await service.get_by_id(player_id)
    if player is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
    return player


@router.get("/players", response_model=List[Player])
async def list_players(service: PlayerService = Depends(get_player_service)) -> List[Player]:
    """Return every player.  Always 200, even when the store is empty."""
    return await service.get_all()
