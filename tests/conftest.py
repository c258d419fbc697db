"""Shared fixtures: an app built around explicit settings and fresh stores."""

import json
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from music_dashboard.config.settings import Settings
from music_dashboard.main import create_app
from music_dashboard.services.player_state import PlayerStateStore
from music_dashboard.services.token_store import TokenStore

FRONTEND = "http://localhost:5173"


@pytest.fixture
def settings():
    return Settings(
        spotify_client_id="client-id",
        spotify_client_secret="client-secret",
        spotify_redirect_uri="http://localhost:5000/callback",
        frontend_uri=FRONTEND,
        openweather_api_key="weather-key",
        news_api_key="news-key",
        giphy_api_key="giphy-key",
        google_search_api_key="google-key",
        google_search_engine_id="cse-id",
    )


@pytest.fixture
def token_store():
    return TokenStore()


@pytest.fixture
def player_state():
    return PlayerStateStore()


@pytest.fixture
def client(settings, token_store, player_state):
    app = create_app(settings=settings, token_store=token_store, player_state=player_state)
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer user-access-token"}


def make_response(status_code=200, json_data=None):
    """Stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = json_data
    response.text = json.dumps(json_data)
    return response


def upstream_track(track_id="t1", name="Song"):
    """Full-size Spotify track object, with fields the projection drops."""
    return {
        "id": track_id,
        "name": name,
        "uri": f"spotify:track:{track_id}",
        "artists": [
            {"id": "a1", "name": "Artist One", "href": "https://api.spotify.com/v1/artists/a1"},
            {"id": "a2", "name": "Artist Two", "type": "artist"},
        ],
        "album": {
            "id": "al1",
            "name": "Album",
            "images": [{"url": "https://i.scdn.co/image/abc", "height": 640, "width": 640}],
            "release_date": "2023-01-01",
        },
        "duration_ms": 210000,
        "popularity": 75,
        "explicit": False,
        "preview_url": None,
    }


def make_non_json_response(status_code=200, text="<html>Bad Gateway</html>"):
    """A 2xx (or other) response whose body is not JSON."""
    response = make_response(status_code)
    response.json.side_effect = ValueError("Expecting value")
    response.text = text
    return response
