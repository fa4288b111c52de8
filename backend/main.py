"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from habitflow import __version__
from habitflow.core.dependencies import get_reminder_scheduler
from habitflow.routes import habits, health, logs, profile

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('apscheduler.scheduler').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors').setLevel(logging.WARNING)
logging.getLogger('apscheduler.executors.default').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown events
    """
    reminder_scheduler = get_reminder_scheduler()

    # Startup
    try:
        reminder_scheduler.start()
    except Exception as e:
        logger.warning(f"Could not start reminder scheduler: {e}")

    yield

    # Shutdown
    try:
        reminder_scheduler.shutdown()
    except Exception as e:
        logger.warning(f"Error stopping reminder scheduler: {e}")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="Habitflow API",
    version=__version__,
    lifespan=lifespan
)

# Register routes
app.include_router(health.router)
app.include_router(habits.router)
app.include_router(logs.router)
app.include_router(profile.router)
