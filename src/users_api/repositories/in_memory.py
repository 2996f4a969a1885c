"""In-memory user repository for tests and local runs without MongoDB."""

from typing import Any, Dict, List

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from users_api.models.user import UserCreate, UserResponse
from users_api.repositories.base import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of the user repository.

    Users are kept in insertion order and keyed by email, so the unique email
    rule holds the same way the MongoDB index enforces it. Failures raise the
    same exception types the MongoDB repository raises.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.create_user({"name": "Alice", "email": "alice@example.com"})
        >>> users = await repo.list_users()
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, UserResponse] = {}

    async def list_users(self) -> List[UserResponse]:
        return list(self._users.values())

    async def create_user(self, data: Any) -> UserResponse:
        fields = UserCreate.model_validate(data)

        if fields.email in self._users:
            raise DuplicateKeyError(
                f'E11000 duplicate key error collection: users index: email_1 dup key: {{ email: "{fields.email}" }}',
                code=11000,
            )

        user = UserResponse(id=str(ObjectId()), name=fields.name, email=fields.email)
        self._users[fields.email] = user
        return user

    def clear(self) -> None:
        """Remove all stored users (for testing purposes)."""
        self._users.clear()
