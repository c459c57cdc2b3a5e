"""Main FastAPI application - share pages plus the reminder scheduler."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import settings
from .firebase import init_firebase, close_firebase
from .routers import share_router
from .schemas.health import HealthResponse
from .services.scheduler import scheduler_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting Vaner backend")
    
    if settings.scheduler_enabled:
        # Fail startup early on bad credentials rather than on the first run
        init_firebase()
        scheduler_service.start()
    else:
        logger.info("Reminder scheduler disabled")
    
    yield
    
    # Shutdown
    scheduler_service.stop()
    close_firebase()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Vaner",
        description="Share pages and daily habit reminders for the Vaner app",
        version="1.0.0",
        lifespan=lifespan,
    )
    
    app.include_router(share_router)
    
    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(status="healthy", scheduler=scheduler_service.running)
    
    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(app, host="0.0.0.0", port=settings.web_port)
