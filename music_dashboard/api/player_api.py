# music_dashboard/api/player_api.py
from fastapi import APIRouter, Depends
from music_dashboard.api.dependencies import get_player_state
from music_dashboard.models.player_models import PlayerState
from music_dashboard.services.player_state import PlayerStateStore

router = APIRouter()


@router.get("/state", response_model=PlayerState)
def read_player_state(store: PlayerStateStore = Depends(get_player_state)):
    return store.get()


@router.put(
    "/state",
    response_model=PlayerState,
    summary="Replace the now-playing track",
    description="Whole replacement: trackUri, trackName and artistName must all be present (null clears).",
)
def write_player_state(state: PlayerState, store: PlayerStateStore = Depends(get_player_state)):
    return store.set(state)
