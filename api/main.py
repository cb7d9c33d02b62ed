"""FastAPI application for the golf trip tracker."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings
from api.logging_config import setup_logging
from database.fallback import open_repository
from database.repository import LeagueRepository

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[LeagueRepository] = None,
) -> FastAPI:
    """Build the app. A repository passed in is used as-is and never closed here."""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Pick the store on startup, close the pool on shutdown."""
        pool = None
        if getattr(app.state, "repository", None) is None:
            app.state.repository, pool = await open_repository(
                settings.database_url,
                mode=settings.store_fallback,
                min_size=settings.pool_min_size,
                max_size=settings.pool_max_size,
            )
        logger.info(
            "Serving league data from %s store; admin editing %s",
            getattr(app.state.repository, "name", "custom"),
            "enabled" if settings.admin_editing_enabled else "disabled",
        )
        yield
        if pool is not None:
            await pool.close()

    app = FastAPI(
        title="Golf Trip Tracker API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import players, rounds, seasons, standings
    app.include_router(seasons.router, prefix="/api/seasons", tags=["seasons"])
    app.include_router(players.router, prefix="/api/players", tags=["players"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(standings.router, prefix="/api", tags=["standings"])

    @app.get("/api/health")
    async def health():
        repo = app.state.repository
        healthy = await repo.health_check()
        return {"status": "ok" if healthy else "degraded", "store": getattr(repo, "name", "custom")}

    return app


def build_default_app() -> FastAPI:
    """App factory for uvicorn: `uvicorn api.main:build_default_app --factory`."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    return create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:build_default_app", factory=True, host="0.0.0.0", port=8000)
