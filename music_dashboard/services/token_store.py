# music_dashboard/services/token_store.py
import time
from typing import Optional
from music_dashboard.models.token_model import TokenSet


class TokenStore:
    """
    In-memory holder for the most recent Spotify tokens.

    One instance per application, created by create_app() and handed to the
    callback / refresh handlers through a dependency. Nothing is persisted,
    a restart drops the tokens.
    """

    def __init__(self):
        self.access_token: Optional[str] = None
        self._refresh_token: Optional[str] = None
        self.expires_at: int = 0

    @property
    def refresh_token(self) -> Optional[str]:
        return self._refresh_token

    # --------------------------
    # Writes
    # --------------------------
    def replace(self, access_token: str, refresh_token: Optional[str], expires_in: int) -> None:
        """Full replace after a successful code exchange."""
        self.access_token = access_token
        self._refresh_token = refresh_token
        self.expires_at = int(time.time()) + int(expires_in)

    def update_access_token(self, access_token: str, expires_in: int) -> None:
        """After a refresh: new access token + expiry, refresh token untouched."""
        self.access_token = access_token
        self.expires_at = int(time.time()) + int(expires_in)

    def clear_access_token(self) -> None:
        # the refresh token survives so the next refresh can still use it
        self.access_token = None
        self.expires_at = 0

    # --------------------------
    # Reads
    # --------------------------
    def is_expired(self, leeway: int = 0) -> bool:
        return self.access_token is None or self.expires_at <= int(time.time()) + leeway

    def snapshot(self) -> Optional[TokenSet]:
        if self.access_token is None:
            return None
        return TokenSet(
            access_token=self.access_token,
            refresh_token=self._refresh_token,
            expires_at=self.expires_at,
        )
