# music_dashboard/api/spotify_auth_api.py
import logging
import secrets
from typing import Optional
from urllib.parse import quote, urlencode
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from music_dashboard.api.dependencies import get_settings, get_token_store
from music_dashboard.config.settings import Settings
from music_dashboard.models.spotify_auth_models import RefreshRequest, RefreshResponse
from music_dashboard.services.token_store import TokenStore
from music_dashboard.services.spotify_token_service import (
    SpotifyTokenError,
    exchange_code,
    refresh_access_token,
)

router = APIRouter()
logger = logging.getLogger(__name__)

SPOTIFY_AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
STATE_COOKIE = "spotify_auth_state"

SCOPES = [
    "user-read-private",
    "user-read-email",
    "user-library-read",
    "playlist-read-private",
    "playlist-read-collaborative",
    "user-top-read",
]


def _frontend_redirect(settings: Settings, **fragment) -> RedirectResponse:
    # tokens/errors ride in the fragment so they never hit server logs or Referer
    url = f"{settings.frontend_uri.rstrip('/')}/#{urlencode(fragment, quote_via=quote)}"
    response = RedirectResponse(url=url)
    response.delete_cookie(STATE_COOKIE)
    return response


@router.get(
    "/login",
    summary="Spotify Login — redirect to the authorize page",
    description="Generates a one-time state value, stores it in a cookie and redirects to Spotify.",
)
def login(settings: Settings = Depends(get_settings)):
    # 1. Fresh anti-CSRF state
    state = secrets.token_urlsafe(16)

    # 2. Spotify authorize URL
    params = {
        "response_type": "code",
        "client_id": settings.spotify_client_id,
        "scope": " ".join(SCOPES),
        "redirect_uri": settings.spotify_redirect_uri,
        "state": state,
    }
    url = f"{SPOTIFY_AUTHORIZE_URL}?{urlencode(params, quote_via=quote)}"

    # 3. Session cookie (no max_age) checked again in /callback
    response = RedirectResponse(url=url)
    response.set_cookie(STATE_COOKIE, state, httponly=True, secure=True, samesite="lax")
    return response


@router.get(
    "/callback",
    summary="Spotify OAuth Callback",
    description=(
        "Spotify redirects here with code/state. The state must match the cookie set by /login, "
        "then the code is exchanged for tokens and the browser is sent back to the frontend."
    ),
)
def callback(
    request: Request,
    code: Optional[str] = Query(None, description="Authorization code from Spotify"),
    state: Optional[str] = Query(None, description="State value issued by /login"),
    settings: Settings = Depends(get_settings),
    token_store: TokenStore = Depends(get_token_store),
):
    # 1. CSRF check, no exchange without a matching state
    stored_state = request.cookies.get(STATE_COOKIE)
    if not state or not stored_state or not secrets.compare_digest(state.encode(), stored_state.encode()):
        logger.warning("Spotify callback rejected: state mismatch")
        return _frontend_redirect(settings, error="state mismatch")

    if not code:
        logger.warning("Spotify callback without an authorization code")
        return _frontend_redirect(settings, error="invalid token")

    # 2. Exchange code for tokens
    try:
        token_data = exchange_code(settings, code)
    except SpotifyTokenError as e:
        logger.error(f"Error exchanging code for token: status={e.status_code} payload={e.payload}")
        return _frontend_redirect(settings, error="invalid token")

    # 3. Keep the token set server-side
    token_store.replace(
        token_data["access_token"],
        token_data.get("refresh_token"),
        token_data["expires_in"],
    )
    logger.info("Spotify tokens obtained")

    # 4. Back to the frontend with the access token in the hash
    return _frontend_redirect(
        settings,
        access_token=token_data["access_token"],
        expires_in=token_data["expires_in"],
    )


@router.post("/refresh_token", response_model=RefreshResponse)
def refresh_token(
    payload: Optional[RefreshRequest] = Body(None),
    settings: Settings = Depends(get_settings),
    token_store: TokenStore = Depends(get_token_store),
):
    """
    Trade a refresh token for a new access token.
    The body token wins; without one the stored refresh token is used and
    the store is updated with the result.
    """
    body_token = payload.refresh_token if payload else None
    using_stored = not body_token

    token_to_use = body_token or token_store.refresh_token
    if not token_to_use:
        raise HTTPException(status_code=400, detail="Refresh token not provided and not stored")

    try:
        token_data = refresh_access_token(settings, token_to_use)
    except SpotifyTokenError as e:
        logger.error(f"Error refreshing token: status={e.status_code} payload={e.payload}")
        if using_stored:
            # stale access token goes, refresh token stays for the next attempt
            token_store.clear_access_token()
        raise HTTPException(status_code=e.status_code or 500, detail="Failed to refresh token")

    if using_stored:
        token_store.update_access_token(token_data["access_token"], token_data["expires_in"])
        logger.info("Spotify token refreshed")

    return {
        "access_token": token_data["access_token"],
        "expires_in": token_data["expires_in"],
    }
