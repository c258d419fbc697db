# music_dashboard/api/dependencies.py
from fastapi import Request
from music_dashboard.config.settings import Settings
from music_dashboard.services.token_store import TokenStore
from music_dashboard.services.player_state import PlayerStateStore


# All three objects are created by create_app() and live on app.state
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_store(request: Request) -> TokenStore:
    return request.app.state.token_store


def get_player_state(request: Request) -> PlayerStateStore:
    return request.app.state.player_state
