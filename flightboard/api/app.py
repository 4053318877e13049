"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from flightboard.api.routes import favourites, featured, search  # noqa: E402
from flightboard.services.aviationstack_client import AviationStackClient  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize Firebase Admin and the provider client on startup."""
    try:
        import firebase_admin
        firebase_admin.initialize_app()
        logger.info("Firebase Admin SDK initialized")
    except ValueError:
        # Already initialized
        logger.info("Firebase Admin SDK already initialized")
    except Exception as exc:
        logger.warning("Firebase Admin SDK init failed: %s", exc)

    provider = AviationStackClient()
    app.state.flight_provider = provider
    try:
        yield
    finally:
        await provider.aclose()


app = FastAPI(
    title="Flightboard API",
    description="Flight search and personal favourites",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search.router, prefix="/api")
app.include_router(featured.router, prefix="/api")
app.include_router(favourites.router, prefix="/api")


@app.get("/api/health")
async def health():
    provider = getattr(app.state, "flight_provider", None)
    return {
        "status": "ok",
        "provider_ready": provider is not None,
    }
