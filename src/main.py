import src.models
from src.auth.router import router as auth_router
from src.users.router import router as users_router
from src.tuits.router import router as tuits_router
from src.reactions.router import router as reactions_router
from src.follows.router import router as follows_router
from src.bookmarks.router import router as bookmarks_router
from src.messages.router import router as messages_router
from src.error_handlers import register_exception_handlers
from src.config import settings
from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from dotenv import load_dotenv
import logging
import subprocess
from pathlib import Path

from src.utils.logging import configure_logging

# Load environment variables from .env file
load_dotenv()

# Configure logging from logging.ini file
logging_config_path = Path(__file__).parent.parent / settings.LOG_CONFIG_FILE
if configure_logging(logging_config_path, settings.LOG_LEVEL):
    print(f"[Startup] Logging configured from {logging_config_path}")
else:
    print(
        f"[Startup] Logging config file not found at {logging_config_path}, using basic configuration"
    )

# Startup and shutdown


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger(__name__)
    logger.info("Application starting up...")

    # Optional: auto run alembic migrations on startup
    if settings.AUTO_MIGRATE_ON_STARTUP:
        try:
            await run_in_threadpool(subprocess.run, ["alembic", "upgrade", "head"], check=True)
            logger.info("[Startup] Alembic migrations applied")
        except Exception as e:
            logger.error(f"[Startup] Alembic migration failed: {e}")

    yield

    logger.info("Application shutting down...")

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    swagger_ui_parameters={"docExpansion": "none"}
)

register_exception_handlers(app)

# Signed cookie session holding the logged in user's id
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE_NAME,
    max_age=settings.SESSION_MAX_AGE_SECONDS,
    same_site=settings.COOKIE_SAMESITE,
    https_only=settings.COOKIE_SECURE,
)

# Add CORS middleware
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin)
                       for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(users_router, prefix=settings.API_PREFIX)
app.include_router(tuits_router, prefix=settings.API_PREFIX)
app.include_router(reactions_router, prefix=settings.API_PREFIX)
app.include_router(follows_router, prefix=settings.API_PREFIX)
app.include_router(bookmarks_router, prefix=settings.API_PREFIX)
app.include_router(messages_router, prefix=settings.API_PREFIX)

# Root endpoint


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}!",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }

# Health check endpoint


@app.get("/health")
async def health_check():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
