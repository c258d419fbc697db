# music_dashboard/services/upstream.py
import logging
from typing import Dict, Optional
import requests
from fastapi import HTTPException

logger = logging.getLogger(__name__)


def upstream_error_message(r: requests.Response) -> Optional[str]:
    """
    Best-effort message from an upstream error body.
    Spotify / Google wrap it as {"error": {"message": ...}}, NewsAPI and
    others use a top-level "message".
    """
    try:
        body = r.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    if isinstance(body.get("message"), str):
        return body["message"]
    return None


def forward_get(
    url: str,
    fallback_message: str,
    params: Optional[Dict] = None,
    headers: Optional[Dict] = None,
    relay_message: bool = False,
    label: str = "upstream",
):
    """
    One GET to a third-party API, JSON body back on 2xx.

    Any failure becomes an HTTPException carrying the upstream status
    (500 when the request never got a response). With relay_message the
    upstream's own error text is used before the fallback.
    """
    try:
        r = requests.get(url, headers=headers, params=params)
    except requests.RequestException as e:
        logger.error(f"{label} request failed: {e}")
        raise HTTPException(status_code=500, detail=fallback_message)

    if not r.ok:
        message = upstream_error_message(r)
        logger.error(f"{label} error: status={r.status_code} message={message}")
        detail = (message if relay_message else None) or fallback_message
        raise HTTPException(status_code=r.status_code or 500, detail=detail)

    try:
        return r.json()
    except ValueError:
        logger.error(f"{label} returned a non-JSON body: status={r.status_code}")
        raise HTTPException(status_code=500, detail=fallback_message)
