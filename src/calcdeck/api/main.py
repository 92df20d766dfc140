import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calcdeck import __version__
from calcdeck.api.deps import get_settings
from calcdeck.tables import TableNotFoundError, TableValidationError, default_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    # Load every table on startup (fail-fast)
    try:
        count = default_catalog().load_all()
        logger.info("Loaded %d tables from %s", count, settings.tables_dir)
    except (FileNotFoundError, TableNotFoundError, TableValidationError) as e:
        logger.critical("Table load failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="calcdeck API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from calcdeck.api.routes import calculators  # noqa: E402

app.include_router(calculators.router, prefix="/api/calculators", tags=["Calculators"])


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "calcdeck"}
