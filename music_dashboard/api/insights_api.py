# music_dashboard/api/insights_api.py
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from music_dashboard.api.dependencies import get_settings
from music_dashboard.config.settings import Settings
from music_dashboard.models.insights_models import GifResponse, WebSearchResult
from music_dashboard.services.insights_service import (
    fetch_gif_url,
    fetch_news,
    fetch_weather,
    lyrics_query,
    web_search,
)

router = APIRouter()
logger = logging.getLogger(__name__)

# Context for the "now playing" insights view. No user auth here,
# the provider keys stay on the server.


def _require_key(value: Optional[str], name: str, detail: str) -> str:
    if not value:
        logger.error(f"{name} missing")
        raise HTTPException(status_code=500, detail=detail)
    return value


@router.get("/weather")
def get_weather(
    lat: Optional[str] = Query(None, description="Latitude"),
    lon: Optional[str] = Query(None, description="Longitude"),
    settings: Settings = Depends(get_settings),
):
    if not lat or not lon:
        raise HTTPException(status_code=400, detail="Missing latitude or longitude")

    api_key = _require_key(
        settings.openweather_api_key, "OPENWEATHER_API_KEY", "Server configuration error for weather."
    )
    return fetch_weather(api_key, lat, lon)


@router.get("/news")
def get_news(
    q: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
):
    if not q:
        raise HTTPException(status_code=400, detail="Missing query")

    api_key = _require_key(settings.news_api_key, "NEWS_API_KEY", "Server configuration error for news.")
    return fetch_news(api_key, q)


@router.get("/gifs", response_model=GifResponse)
def get_gif(
    q: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
):
    if not q:
        raise HTTPException(status_code=400, detail="Missing query parameter (q).")

    api_key = _require_key(settings.giphy_api_key, "GIPHY_API_KEY", "Server configuration error for GIFs.")
    return {"url": fetch_gif_url(api_key, q)}


@router.get("/search", response_model=List[WebSearchResult])
def search_web(
    q: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
):
    if not q:
        raise HTTPException(status_code=400, detail="Missing search query parameter (q).")

    if not settings.google_search_api_key or not settings.google_search_engine_id:
        logger.error("Google Search API Key or Search Engine ID missing")
        raise HTTPException(status_code=500, detail="Server configuration error for search.")

    return web_search(
        settings.google_search_api_key,
        settings.google_search_engine_id,
        q,
        "Failed fetching Google search results.",
    )


@router.get("/search-lyrics", response_model=List[WebSearchResult])
def search_lyrics(
    trackName: Optional[str] = Query(None),
    artistName: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
):
    if not trackName or not artistName:
        raise HTTPException(status_code=400, detail="Missing trackName or artistName query parameter.")

    if not settings.google_search_api_key or not settings.google_search_engine_id:
        logger.error("Google Search API Key or Search Engine ID missing for lyrics search")
        raise HTTPException(status_code=500, detail="Server configuration error for lyrics search.")

    query = lyrics_query(trackName, artistName)
    logger.info(f"Searching Google for lyrics query: {query}")

    results = web_search(
        settings.google_search_api_key,
        settings.google_search_engine_id,
        query,
        "Failed fetching Google search results for lyrics.",
    )
    logger.info(f"Found {len(results)} potential lyrics links.")
    return results
