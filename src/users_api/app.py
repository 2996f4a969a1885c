"""
Users API application
Core functionality: list users, create users
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api import __version__
from users_api.config.settings import ALLOWED_ORIGINS
from users_api.repositories import UserRepository, create_user_repository
from users_api.services.users_service import UsersService
from users_api.api.routes import users
from users_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    repository = app.state.users_service.repository
    try:
        await repository.connect()
    except Exception as e:
        logger.critical(f"Startup aborted, store unavailable: {e}")
        raise
    yield
    await repository.close()


def create_app(repository: Optional[UserRepository] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        repository: User storage; defaults to the configured backend

    Returns:
        The assembled application
    """
    if repository is None:
        repository = create_user_repository()

    app = FastAPI(
        title="Users API",
        description="List and create users stored in MongoDB",
        version=__version__,
        lifespan=lifespan
    )
    app.state.users_service = UsersService(repository)

    # CORS middleware
    if ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    return app


# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
