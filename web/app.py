"""
SkillRank Web Application
HTTP service that ranks companies against a skill profile using the
skillrank engine
"""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillrank import __version__
from skillrank.config import settings as engine_settings
from web.config import get_settings
from web.core.heartbeat import heartbeat
from web.routers import analysis_router, fallback_router, status_router

# Setup logging
logging.basicConfig(
    level=engine_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("web-app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: liveness heartbeat runs for the app's lifetime"""
    settings = get_settings()

    # Startup
    heartbeat_task = asyncio.create_task(
        heartbeat(settings.LIVENESS_FILE, settings.HEARTBEAT_INTERVAL)
    )
    logger.info(
        f"Application started (candidates: {settings.CANDIDATE_SOURCE_TYPE}, "
        f"degenerate policy: {engine_settings.DEGENERATE_POLICY.value})"
    )

    yield

    # Shutdown
    logger.info("Application shutting down...")
    heartbeat_task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await heartbeat_task
    logger.info("Graceful shutdown complete")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="SkillRank API",
        description="Rank companies by cosine similarity to a skill profile",
        version=__version__,
        lifespan=lifespan
    )

    # TODO: restrict CORS_ORIGINS per environment once the frontend origins are fixed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "HEAD"],
        allow_headers=["*"],
        expose_headers=["X-Skipped-Candidates"],
    )

    # Register routers
    app.include_router(status_router)
    app.include_router(analysis_router)
    app.include_router(fallback_router)
    return app


app = create_app()


def serve() -> None:
    """Run the service; uvicorn drains connections on SIGINT/SIGTERM."""
    import uvicorn

    settings = get_settings()
    logger.info(f"Serving at http://{settings.HOST}:{settings.PORT}/")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
    )


if __name__ == "__main__":
    serve()
