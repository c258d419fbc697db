# music_dashboard/services/user_auth.py
from fastapi import HTTPException, Header

BEARER_ERROR = "Authorization header missing or invalid (Bearer token required)"


def get_bearer_token(authorization: str = Header(None)) -> str:
    """
    Pull the Spotify access token out of `Authorization: Bearer <token>`.
    The token comes from the browser on every call, never from the TokenStore.
    """

    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail=BEARER_ERROR)

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise HTTPException(status_code=401, detail=BEARER_ERROR)

    return token
