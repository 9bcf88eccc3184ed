import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from eventhub.config import get_settings
from eventhub.infrastructure.database import engine, initialize_database
from eventhub.infrastructure.scheduler import build_notification_scheduler
from eventhub.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and run the reminder scheduler for the app's lifetime."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    initialize_database()

    scheduler = None
    if settings.notification_scheduler_enabled:
        scheduler = build_notification_scheduler()
        scheduler.start()
    else:
        logger.info("Notification scheduler disabled via settings")
    app.state.notification_scheduler = scheduler

    yield

    if scheduler is not None:
        scheduler.stop()
    app.state.notification_scheduler = None
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="EventHub API", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
