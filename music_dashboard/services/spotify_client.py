# music_dashboard/services/spotify_client.py
from typing import Any, Dict, List, Optional
from music_dashboard.services.upstream import forward_get

SPOTIFY_API_BASE = "https://api.spotify.com/v1"

PLAYLIST_TRACK_FIELDS = "items(track(id,name,uri,artists(name),album(name,images),duration_ms))"


# --------- Spotify API Wrapper ---------
def spotify_get(access_token: str, path: str, fallback_message: str, params: Optional[Dict] = None) -> Any:
    url = f"{SPOTIFY_API_BASE}/{path}"
    headers = {"Authorization": f"Bearer {access_token}"}

    return forward_get(
        url,
        fallback_message,
        params=params,
        headers=headers,
        relay_message=True,
        label=f"Spotify /{path}",
    )


# --------- Track projection ---------
def simplify_track(track: Dict) -> Dict:
    """
    Reduce a Spotify track object to
    {id, name, uri, artists: [{name}], album: {name, images}, duration_ms}.

    Missing artists / album / images fall back to empty values instead of
    raising, so one odd track never fails the whole listing.
    """
    album = track.get("album") or {}

    return {
        "id": track.get("id"),
        "name": track.get("name"),
        "uri": track.get("uri"),
        "artists": [{"name": artist.get("name")} for artist in track.get("artists") or []],
        "album": {
            "name": album.get("name"),
            "images": list(album.get("images") or []),
        },
        "duration_ms": track.get("duration_ms"),
    }


def simplify_playlist_items(items: List[Dict]) -> List[Dict]:
    # removed / local tracks come back as {"track": null}
    return [simplify_track(item["track"]) for item in items if item.get("track")]
