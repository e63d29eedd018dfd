import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from learnledger.api.router import api_router
from learnledger.core.config import get_settings
from learnledger.core.database import init_db

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler for startup and shutdown.

    Creates the ledger tables on startup.
    """
    init_db()
    logger.info(f"{settings.app_name} ledger ready")
    yield


app = FastAPI(
    title=settings.app_name,
    description="Course enrollment ledger with role-based entry points",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.get("/health", tags=["health"])
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


# Include API routes
app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
