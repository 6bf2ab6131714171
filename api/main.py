"""FastAPI application for the shot memory service."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from database.connection import db

load_dotenv()


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shot store on startup. It lives for the whole process."""
    db.initialize(os.environ.get("SHOT_MEMORY_PATH"))
    yield


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Shot Memory API",
        version="1.0.0",
        lifespan=lifespan,
    )

    from api.routers import courses, feedback, shots
    app.include_router(shots.router, prefix="/api/shots", tags=["shots"])
    app.include_router(feedback.router, prefix="/api/feedback", tags=["feedback"])
    app.include_router(courses.router, prefix="/api/courses", tags=["courses"])

    @app.get("/api/health")
    def health():
        healthy = db.manager.health_check()
        return {"status": "ok" if healthy else "degraded", "store": healthy}

    return app


app = create_app()
