"""Planar Segments FastAPI Application"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from dotenv import load_dotenv
load_dotenv()  # Load .env file

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .routes import health, segments

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler."""
    logger.info("Starting Planar Segments API...")
    yield
    logger.info("Shutting down Planar Segments API...")


app = FastAPI(
    title="Planar Segments",
    description="Robust classification of planar segment intersections",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report validation errors without echoing the rejected input.

    Rejected values such as infinite coordinates cannot be written as JSON.
    """
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": errors})


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(segments.router, prefix="/api/segments", tags=["Segments"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Planar Segments",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
    }
