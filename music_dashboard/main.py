# music_dashboard/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# === Import Routers ===
from music_dashboard.api.spotify_auth_api import router as spotify_auth_router
from music_dashboard.api.spotify_proxy_api import router as spotify_proxy_router
from music_dashboard.api.insights_api import router as insights_router
from music_dashboard.api.player_api import router as player_router
from music_dashboard.config.settings import Settings
from music_dashboard.services.token_store import TokenStore
from music_dashboard.services.player_state import PlayerStateStore

logger = logging.getLogger(__name__)


def _log_configuration(settings: Settings):
    logger.info(f"Configured Frontend URL: {settings.frontend_uri}")
    logger.info(f"Spotify Callback URL: {settings.spotify_redirect_uri}")

    missing = settings.missing_spotify_credentials()
    if missing:
        logger.warning(f"Spotify credentials missing: {', '.join(missing)}")

    missing = settings.missing_insight_keys()
    if missing:
        logger.warning(f"External API keys missing (their /api endpoints will fail): {', '.join(missing)}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # every error body is {"error": ...}
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("query", "body"))
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(
    settings: Optional[Settings] = None,
    token_store: Optional[TokenStore] = None,
    player_state: Optional[PlayerStateStore] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log_configuration(settings)
        yield

    app = FastAPI(
        title="Music Dashboard Backend",
        description=(
            "Backend for: "
            "• Spotify OAuth (authorization code + refresh) "
            "• Authenticated Spotify proxy "
            "• Weather / News / GIF / Web search insights "
            "• Shared now-playing state"
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # === Per-application state ===
    app.state.settings = settings
    app.state.token_store = token_store or TokenStore()
    app.state.player_state = player_state or PlayerStateStore()

    # === CORS Middleware ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_uri],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # === Spotify OAuth (login / callback / refresh) ===
    app.include_router(spotify_auth_router, tags=["Spotify OAuth"])

    # === Spotify proxy (Bearer token required) ===
    app.include_router(spotify_proxy_router, tags=["Spotify"])

    # === Insights: weather / news / gifs / web search ===
    app.include_router(insights_router, prefix="/api", tags=["Insights"])

    # === Now playing ===
    app.include_router(player_router, prefix="/player", tags=["Player"])

    @app.get("/")
    def root():
        return {
            "status": "ok",
            "message": "Music Dashboard Backend running with Spotify OAuth + proxy + insights",
        }

    return app


app = create_app()


def run():
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)


if __name__ == "__main__":
    run()
