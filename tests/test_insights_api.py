"""Tests for the /api insights forwarders"""

from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from music_dashboard.config.settings import Settings
from music_dashboard.main import create_app

from conftest import make_non_json_response, make_response

UPSTREAM_GET = "music_dashboard.services.upstream.requests.get"


@pytest.fixture
def unconfigured_client():
    bare = Settings(
        spotify_client_id="client-id",
        spotify_client_secret="client-secret",
        spotify_redirect_uri="http://localhost:5000/callback",
    )
    return TestClient(create_app(settings=bare))


class TestWeather:

    def test_forwards_with_metric_units(self, client):
        body = {"weather": [{"main": "Clear"}], "main": {"temp": 21.5}}
        with patch(UPSTREAM_GET, return_value=make_response(200, body)) as mock_get:
            response = client.get("/api/weather?lat=52.5&lon=13.4")

        assert response.status_code == 200
        assert response.json() == body
        assert mock_get.call_args.args[0] == "https://api.openweathermap.org/data/2.5/weather"
        assert mock_get.call_args.kwargs["params"] == {
            "lat": "52.5",
            "lon": "13.4",
            "appid": "weather-key",
            "units": "metric",
        }

    def test_non_json_success_body(self, client):
        with patch(UPSTREAM_GET, return_value=make_non_json_response(200)):
            response = client.get("/api/weather?lat=1&lon=2")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed fetching weather data."}

    @pytest.mark.parametrize("query", ["", "?lat=1", "?lon=2"])
    def test_missing_coordinates(self, client, query):
        with patch(UPSTREAM_GET) as mock_get:
            response = client.get(f"/api/weather{query}")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing latitude or longitude"}
        mock_get.assert_not_called()

    def test_missing_key(self, unconfigured_client):
        with patch(UPSTREAM_GET) as mock_get:
            response = unconfigured_client.get("/api/weather?lat=1&lon=2")

        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error for weather."}
        mock_get.assert_not_called()

    def test_upstream_status_is_relayed(self, client):
        with patch(UPSTREAM_GET, return_value=make_response(401, {"cod": 401, "message": "Invalid API key"})):
            response = client.get("/api/weather?lat=1&lon=2")

        assert response.status_code == 401
        assert response.json() == {"error": "Failed fetching weather data."}


class TestNews:

    def test_returns_articles(self, client):
        articles = [{"title": "New album"}, {"title": "Tour dates"}]
        with patch(UPSTREAM_GET, return_value=make_response(200, {"status": "ok", "articles": articles})) as mock_get:
            response = client.get("/api/news", params={"q": "Daft Punk"})

        assert response.json() == articles
        assert mock_get.call_args.args[0] == "https://newsapi.org/v2/everything"
        assert mock_get.call_args.kwargs["params"] == {
            "q": "Daft Punk",
            "apiKey": "news-key",
            "pageSize": 5,
            "sortBy": "publishedAt",
            "language": "en",
        }

    def test_missing_query(self, client):
        response = client.get("/api/news")
        assert response.status_code == 400
        assert response.json() == {"error": "Missing query"}

    def test_missing_key(self, unconfigured_client):
        response = unconfigured_client.get("/api/news?q=x")
        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error for news."}

    def test_network_error(self, client):
        with patch(UPSTREAM_GET, side_effect=requests.ConnectionError("down")):
            response = client.get("/api/news?q=x")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed fetching news articles."}


class TestGifs:

    def test_returns_first_downsized_url(self, client):
        body = {"data": [{"images": {"downsized": {"url": "https://media.giphy.com/a.gif"}}}]}
        with patch(UPSTREAM_GET, return_value=make_response(200, body)) as mock_get:
            response = client.get("/api/gifs?q=happy")

        assert response.json() == {"url": "https://media.giphy.com/a.gif"}
        assert mock_get.call_args.kwargs["params"] == {
            "q": "happy",
            "api_key": "giphy-key",
            "limit": 1,
            "rating": "g",
        }

    def test_no_results_is_null_url(self, client):
        with patch(UPSTREAM_GET, return_value=make_response(200, {"data": []})):
            response = client.get("/api/gifs?q=nothing")

        assert response.json() == {"url": None}

    def test_missing_query(self, client):
        response = client.get("/api/gifs")
        assert response.status_code == 400
        assert response.json() == {"error": "Missing query parameter (q)."}

    def test_missing_key(self, unconfigured_client):
        response = unconfigured_client.get("/api/gifs?q=x")
        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error for GIFs."}


class TestWebSearch:

    GOOGLE_BODY = {
        "items": [
            {"title": "Bio", "link": "https://example.com/bio", "snippet": "Born in...", "kind": "customsearch#result"},
            {"title": "Wiki", "link": "https://example.com/wiki", "snippet": "Is a band", "cacheId": "x"},
        ]
    }

    def test_search_trims_results(self, client):
        with patch(UPSTREAM_GET, return_value=make_response(200, self.GOOGLE_BODY)) as mock_get:
            response = client.get("/api/search?q=Daft Punk biography")

        assert response.json() == [
            {"title": "Bio", "link": "https://example.com/bio", "snippet": "Born in..."},
            {"title": "Wiki", "link": "https://example.com/wiki", "snippet": "Is a band"},
        ]
        assert mock_get.call_args.args[0] == "https://www.googleapis.com/customsearch/v1"
        assert mock_get.call_args.kwargs["params"] == {
            "key": "google-key",
            "cx": "cse-id",
            "q": "Daft Punk biography",
            "num": 5,
        }

    def test_search_without_items(self, client):
        with patch(UPSTREAM_GET, return_value=make_response(200, {})):
            response = client.get("/api/search?q=zzz")
        assert response.json() == []

    def test_search_missing_query(self, client):
        response = client.get("/api/search")
        assert response.status_code == 400
        assert response.json() == {"error": "Missing search query parameter (q)."}

    def test_search_missing_key(self, unconfigured_client):
        response = unconfigured_client.get("/api/search?q=x")
        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error for search."}

    def test_search_upstream_error(self, client):
        body = {"error": {"code": 429, "message": "Quota exceeded"}}
        with patch(UPSTREAM_GET, return_value=make_response(429, body)):
            response = client.get("/api/search?q=x")

        assert response.status_code == 429
        assert response.json() == {"error": "Failed fetching Google search results."}

    def test_lyrics_builds_quoted_query(self, client):
        with patch(UPSTREAM_GET, return_value=make_response(200, self.GOOGLE_BODY)) as mock_get:
            response = client.get("/api/search-lyrics", params={"trackName": "One More Time", "artistName": "Daft Punk"})

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert mock_get.call_args.kwargs["params"]["q"] == '"One More Time" "Daft Punk" lyrics'

    @pytest.mark.parametrize("params", [{}, {"trackName": "x"}, {"artistName": "y"}])
    def test_lyrics_missing_params(self, client, params):
        with patch(UPSTREAM_GET) as mock_get:
            response = client.get("/api/search-lyrics", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing trackName or artistName query parameter."}
        mock_get.assert_not_called()

    def test_lyrics_missing_key(self, unconfigured_client):
        response = unconfigured_client.get("/api/search-lyrics?trackName=x&artistName=y")
        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error for lyrics search."}

    def test_lyrics_upstream_error(self, client):
        with patch(UPSTREAM_GET, return_value=make_response(403, None)):
            response = client.get("/api/search-lyrics?trackName=x&artistName=y")

        assert response.status_code == 403
        assert response.json() == {"error": "Failed fetching Google search results for lyrics."}
