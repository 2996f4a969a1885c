"""
MongoDB user repository backed by the Beanie User document
"""

import logging
from typing import Any, List, Optional

from users_api.config.settings import MONGODB_URI, MONGODB_TIMEOUT_MS
from users_api.database.connection import init_database, close_database
from users_api.models.user import User, UserCreate, UserResponse
from users_api.repositories.base import UserRepository

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """Stores users in the ``users`` collection"""

    def __init__(self, uri: Optional[str] = None, timeout_ms: Optional[int] = None):
        self.uri = uri or MONGODB_URI
        self.timeout_ms = timeout_ms if timeout_ms is not None else MONGODB_TIMEOUT_MS

    async def connect(self) -> None:
        await init_database(self.uri, self.timeout_ms)

    async def close(self) -> None:
        await close_database()

    async def list_users(self) -> List[UserResponse]:
        users = await User.find_all().to_list()
        return [self.to_response(user) for user in users]

    async def create_user(self, data: Any) -> UserResponse:
        fields = UserCreate.model_validate(data)
        user = User(name=fields.name, email=fields.email)
        await user.insert()
        return self.to_response(user)

    @staticmethod
    def to_response(user: User) -> UserResponse:
        return UserResponse(id=str(user.id), name=user.name, email=user.email)
