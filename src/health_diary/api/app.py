"""FastAPI application factory."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from health_diary.api.days import router as days_router
from health_diary.api.medications import router as medications_router
from health_diary.api.trends import router as trends_router
from health_diary.app_logging import configure_logging
from health_diary.config import parse_origins
from health_diary.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(days_router)
    app.include_router(medications_router)
    app.include_router(trends_router)

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok", "timestamp": datetime.now(tz=UTC).isoformat()}

    build_dir = container.settings.client_build_dir
    if build_dir:
        if Path(build_dir).is_dir():
            app.mount("/", StaticFiles(directory=build_dir, html=True), name="client")
        else:
            logger.warning(
                "Client build directory not found", extra={"path": build_dir}
            )

    return app
