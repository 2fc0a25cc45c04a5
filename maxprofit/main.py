from contextlib import asynccontextmanager

from fastapi import FastAPI

from maxprofit.api.routes import router as api_router
from maxprofit.config.settings import get_settings
from maxprofit.models.entities import CATALOG
from maxprofit.utils.logging_config import setup_logging


logger = setup_logging()
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Catalog: {', '.join(f'{b.name}({b.tag.value})' for b in CATALOG)}")
    logger.info(f"Horizon ceiling: {settings.max_horizon}")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    description="Maximum-profit planner for sequential construction",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.include_router(api_router, prefix="/api/v1", tags=["profit"])


@app.get("/health", tags=["health"])
def health_check():
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "ok", "app": settings.app_name, "version": "1.0.0"}
