"""Tests for the reduced track projection"""

import copy

from music_dashboard.services.spotify_client import simplify_playlist_items, simplify_track

from conftest import upstream_track


def test_simplify_track_keeps_only_projection_fields():
    result = simplify_track(upstream_track("t1", "Song"))

    assert result == {
        "id": "t1",
        "name": "Song",
        "uri": "spotify:track:t1",
        "artists": [{"name": "Artist One"}, {"name": "Artist Two"}],
        "album": {
            "name": "Album",
            "images": [{"url": "https://i.scdn.co/image/abc", "height": 640, "width": 640}],
        },
        "duration_ms": 210000,
    }


def test_simplify_track_is_pure():
    track = upstream_track()
    original = copy.deepcopy(track)

    assert simplify_track(track) == simplify_track(track)
    assert track == original


def test_simplify_track_tolerates_missing_artists_and_images():
    track = {"id": "t1", "name": "Bare", "uri": "spotify:track:t1", "album": {"name": "A"}, "duration_ms": 1}

    result = simplify_track(track)
    assert result["artists"] == []
    assert result["album"] == {"name": "A", "images": []}


def test_simplify_track_without_album():
    result = simplify_track({"id": "t1", "artists": None, "album": None})
    assert result["album"] == {"name": None, "images": []}
    assert result["artists"] == []


def test_simplify_playlist_items_skips_null_tracks():
    items = [{"track": upstream_track("t1")}, {"track": None}, {}]
    assert [t["id"] for t in simplify_playlist_items(items)] == ["t1"]
