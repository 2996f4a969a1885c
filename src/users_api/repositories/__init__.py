"""
User repository implementations and factory
"""

from users_api.config.settings import USER_REPOSITORY
from users_api.repositories.base import UserRepository
from users_api.repositories.in_memory import InMemoryUserRepository
from users_api.repositories.mongo import MongoUserRepository


def create_user_repository(backend: str = USER_REPOSITORY) -> UserRepository:
    """Create the user repository for the configured backend.

    Args:
        backend: "mongodb" or "inmemory"

    Returns:
        UserRepository: The repository implementation
    """
    backend = backend.lower()

    if backend == "mongodb":
        return MongoUserRepository()
    elif backend == "inmemory":
        return InMemoryUserRepository()
    else:
        raise ValueError(f"Invalid user repository backend: {backend}. Expected 'mongodb' or 'inmemory'")


__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
    "MongoUserRepository",
    "create_user_repository",
]
