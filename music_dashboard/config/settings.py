# music_dashboard/config/settings.py
import os
from typing import List, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_env():
    if os.getenv("ENVIRONMENT") == "production":
        return

    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    env_path = os.path.join(base_dir, ".env")

    if os.path.exists(env_path):
        load_dotenv(env_path)


class Settings(BaseModel):
    # Spotify
    spotify_client_id: Optional[str] = None
    spotify_client_secret: Optional[str] = None
    spotify_redirect_uri: Optional[str] = None

    # Browser app that receives the OAuth redirects
    frontend_uri: str = "http://localhost:5173"

    # Insights providers
    openweather_api_key: Optional[str] = None
    news_api_key: Optional[str] = None
    giphy_api_key: Optional[str] = None
    google_search_api_key: Optional[str] = None
    google_search_engine_id: Optional[str] = None

    port: int = 5000
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value):
        # unknown names fall back to INFO instead of breaking logging.basicConfig
        level = str(value or "").strip().upper()
        return level if level in LOG_LEVELS else "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_env()
        return cls(
            spotify_client_id=os.getenv("SPOTIFY_CLIENT_ID"),
            spotify_client_secret=os.getenv("SPOTIFY_CLIENT_SECRET"),
            spotify_redirect_uri=os.getenv("SPOTIFY_REDIRECT_URI"),
            frontend_uri=os.getenv("FRONTEND_URI", "http://localhost:5173"),
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY"),
            news_api_key=os.getenv("NEWS_API_KEY"),
            giphy_api_key=os.getenv("GIPHY_API_KEY"),
            google_search_api_key=os.getenv("GOOGLE_SEARCH_API_KEY"),
            google_search_engine_id=os.getenv("GOOGLE_SEARCH_ENGINE_ID"),
            port=int(os.getenv("PORT", "5000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def missing_spotify_credentials(self) -> List[str]:
        required = {
            "SPOTIFY_CLIENT_ID": self.spotify_client_id,
            "SPOTIFY_CLIENT_SECRET": self.spotify_client_secret,
            "SPOTIFY_REDIRECT_URI": self.spotify_redirect_uri,
        }
        return [name for name, value in required.items() if not value]

    def missing_insight_keys(self) -> List[str]:
        required = {
            "OPENWEATHER_API_KEY": self.openweather_api_key,
            "NEWS_API_KEY": self.news_api_key,
            "GIPHY_API_KEY": self.giphy_api_key,
            "GOOGLE_SEARCH_API_KEY": self.google_search_api_key,
            "GOOGLE_SEARCH_ENGINE_ID": self.google_search_engine_id,
        }
        return [name for name, value in required.items() if not value]
