# music_dashboard/models/player_models.py
from pydantic import BaseModel, Field
from typing import Optional


class PlayerState(BaseModel):
    """
    The "now playing" slot. All three keys must be sent on every update,
    null is how a caller clears a field.
    """
    trackUri: Optional[str] = Field(..., description="spotify:track:... URI, null when nothing is selected")
    trackName: Optional[str] = Field(...)
    artistName: Optional[str] = Field(...)

    @classmethod
    def empty(cls) -> "PlayerState":
        return cls(trackUri=None, trackName=None, artistName=None)

    @property
    def is_empty(self) -> bool:
        return self.trackUri is None
