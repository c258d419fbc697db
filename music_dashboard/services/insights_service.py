# music_dashboard/services/insights_service.py
from typing import Dict, List, Optional
from music_dashboard.services.upstream import forward_get

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
NEWS_API_URL = "https://newsapi.org/v2/everything"
GIPHY_SEARCH_URL = "https://api.giphy.com/v1/gifs/search"
GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"

NEWS_PAGE_SIZE = 5
WEB_SEARCH_RESULTS = 5


def fetch_weather(api_key: str, lat: str, lon: str) -> Dict:
    """Current weather at lat/lon, temperatures in Celsius."""
    return forward_get(
        OPENWEATHER_URL,
        "Failed fetching weather data.",
        params={"lat": lat, "lon": lon, "appid": api_key, "units": "metric"},
        label="OpenWeather API",
    )


def fetch_news(api_key: str, query: str) -> List[Dict]:
    data = forward_get(
        NEWS_API_URL,
        "Failed fetching news articles.",
        params={
            "q": query,
            "apiKey": api_key,
            "pageSize": NEWS_PAGE_SIZE,
            "sortBy": "publishedAt",
            "language": "en",
        },
        label="News API",
    )
    return data.get("articles") or []


def fetch_gif_url(api_key: str, query: str) -> Optional[str]:
    data = forward_get(
        GIPHY_SEARCH_URL,
        "Failed fetching GIF.",
        params={"q": query, "api_key": api_key, "limit": 1, "rating": "g"},
        label="Giphy API",
    )

    results = data.get("data") or []
    if not results:
        return None
    return ((results[0].get("images") or {}).get("downsized") or {}).get("url")


def lyrics_query(track_name: str, artist_name: str) -> str:
    return f'"{track_name}" "{artist_name}" lyrics'


def web_search(api_key: str, engine_id: str, query: str, fallback_message: str) -> List[Dict]:
    """Google Custom Search, trimmed to title / link / snippet."""
    data = forward_get(
        GOOGLE_SEARCH_URL,
        fallback_message,
        params={"key": api_key, "cx": engine_id, "q": query, "num": WEB_SEARCH_RESULTS},
        label="Google Search API",
    )

    return [
        {
            "title": item.get("title"),
            "link": item.get("link"),
            "snippet": item.get("snippet"),
        }
        for item in data.get("items") or []
    ]
