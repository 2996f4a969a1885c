"""
User repository interface
"""

from abc import ABC, abstractmethod
from typing import Any, List

from users_api.models.user import UserResponse


class UserRepository(ABC):
    """Storage port used by the users service.

    Implementations raise on failure; the service decides how failures
    surface to callers.
    """

    async def connect(self) -> None:
        """Open the underlying store. Called once at application startup."""

    async def close(self) -> None:
        """Release the underlying store. Called at application shutdown."""

    @abstractmethod
    async def list_users(self) -> List[UserResponse]:
        """Return every stored user in the store's natural order."""

    @abstractmethod
    async def create_user(self, data: Any) -> UserResponse:
        """
        Persist a new user.

        Args:
            data: Decoded request body, expected to be an object with ``name`` and ``email``

        Returns:
            The created user with its assigned id

        Raises:
            pydantic.ValidationError: If a field is missing or not a string
            pymongo.errors.DuplicateKeyError: If the email is already stored
        """
