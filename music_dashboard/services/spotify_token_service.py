# music_dashboard/services/spotify_token_service.py
import base64
from typing import Dict, Optional
import requests
from music_dashboard.config.settings import Settings

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"


class SpotifyTokenError(Exception):
    """Token endpoint refused the request, or could not be reached (status_code is None)."""

    def __init__(self, status_code: Optional[int], payload=None):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"Spotify token endpoint failed (status={status_code}): {payload}")


def basic_auth_header(client_id: str, client_secret: str) -> str:
    raw = f"{client_id}:{client_secret}".encode()
    return "Basic " + base64.b64encode(raw).decode()


def _post_token(settings: Settings, payload: Dict) -> Dict:
    headers = {
        "Content-Type": "application/x-www-form-urlencoded",
        "Authorization": basic_auth_header(
            settings.spotify_client_id or "", settings.spotify_client_secret or ""
        ),
    }

    try:
        r = requests.post(SPOTIFY_TOKEN_URL, data=payload, headers=headers)
    except requests.RequestException as e:
        raise SpotifyTokenError(None, str(e)) from e

    if not r.ok:
        try:
            body = r.json()
        except ValueError:
            body = r.text
        raise SpotifyTokenError(r.status_code, body)

    try:
        token_data = r.json()
    except ValueError:
        raise SpotifyTokenError(None, r.text)

    # a 2xx body is only usable with both fields
    if (
        not isinstance(token_data, dict)
        or not token_data.get("access_token")
        or not isinstance(token_data.get("expires_in"), int)
    ):
        raise SpotifyTokenError(None, token_data)

    return token_data


def exchange_code(settings: Settings, code: str) -> Dict:
    """authorization_code grant → {access_token, refresh_token, expires_in, ...}"""
    return _post_token(settings, {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": settings.spotify_redirect_uri,
    })


def refresh_access_token(settings: Settings, refresh_token: str) -> Dict:
    return _post_token(settings, {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
    })
