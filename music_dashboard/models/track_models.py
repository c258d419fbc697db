from pydantic import BaseModel
from typing import Any, Dict, List, Optional

# ======================================================
# Reduced track projection shared by /search and
# /playlists/{playlist_id}/tracks
# ======================================================

class TrackArtist(BaseModel):
    name: Optional[str] = None


class TrackAlbum(BaseModel):
    name: Optional[str] = None
    images: List[Dict[str, Any]] = []


class SimplifiedTrack(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    uri: Optional[str] = None
    artists: List[TrackArtist]
    album: TrackAlbum
    duration_ms: Optional[int] = None


class TrackListResponse(BaseModel):
    tracks: List[SimplifiedTrack]
