# music_dashboard/models/token_model.py
from pydantic import BaseModel


class TokenSet(BaseModel):
    access_token: str
    refresh_token: str | None = None
    expires_at: int   # Unix timestamp
