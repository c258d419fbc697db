# music_dashboard/api/spotify_proxy_api.py
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from music_dashboard.models.track_models import TrackListResponse
from music_dashboard.services.user_auth import get_bearer_token
from music_dashboard.services.spotify_client import (
    PLAYLIST_TRACK_FIELDS,
    simplify_playlist_items,
    simplify_track,
    spotify_get,
)

router = APIRouter()

# Every route below needs the caller's Spotify access token as a Bearer header;
# get_bearer_token answers 401 before anything is sent upstream.


@router.get("/user")
def get_user(token: str = Depends(get_bearer_token)):
    return spotify_get(token, "me", "Failed fetching user data")


@router.get("/playlists")
def get_playlists(
    limit: int = Query(20),
    token: str = Depends(get_bearer_token),
):
    data = spotify_get(token, "me/playlists", "Failed fetching playlists", params={"limit": limit})
    return data.get("items") or []


@router.get("/liked-songs")
def get_liked_songs(
    limit: int = Query(20),
    offset: int = Query(0),
    token: str = Depends(get_bearer_token),
):
    data = spotify_get(
        token,
        "me/tracks",
        "Failed fetching liked songs",
        params={"limit": limit, "offset": offset},
    )
    return data.get("items") or []


@router.get("/top-tracks")
def get_top_tracks(
    limit: int = Query(20),
    offset: int = Query(0),
    time_range: str = Query("medium_term", description="short_term | medium_term | long_term"),
    token: str = Depends(get_bearer_token),
):
    data = spotify_get(
        token,
        "me/top/tracks",
        "Failed to fetch top tracks",
        params={"limit": limit, "offset": offset, "time_range": time_range},
    )
    return data.get("items") or []


@router.get("/search", response_model=TrackListResponse)
def search_tracks(
    q: Optional[str] = Query(None, description="Search text"),
    limit: int = Query(20),
    offset: int = Query(0),
    token: str = Depends(get_bearer_token),
):
    if not q:
        raise HTTPException(status_code=400, detail="Search query is required")

    data = spotify_get(
        token,
        "search",
        "Failed to search tracks",
        params={"q": q, "type": "track", "limit": limit, "offset": offset},
    )

    items = (data.get("tracks") or {}).get("items") or []
    return {"tracks": [simplify_track(track) for track in items if track]}


@router.get("/playlists/{playlist_id}/tracks", response_model=TrackListResponse)
def get_playlist_tracks(
    playlist_id: str,
    limit: int = Query(50),
    offset: int = Query(0),
    token: str = Depends(get_bearer_token),
):
    data = spotify_get(
        token,
        f"playlists/{playlist_id}/tracks",
        "Failed to fetch playlist tracks",
        params={"limit": limit, "offset": offset, "fields": PLAYLIST_TRACK_FIELDS},
    )
    return {"tracks": simplify_playlist_items(data.get("items") or [])}
