"""
Users service - list and create users through the configured repository
"""

import logging
from typing import Any
from fastapi import Request
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError

from users_api.repositories.base import UserRepository
from users_api.services.base_service import ServiceResult

logger = logging.getLogger(__name__)


class UsersService:
    """Service for user operations"""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def list_users(self) -> ServiceResult:
        """
        Get every stored user

        Store failures are not caught here; they propagate to the
        application's error handlers.

        Returns:
            ServiceResult with all users in natural order
        """
        users = await self.repository.list_users()
        return ServiceResult(success=True, data=users, count=len(users))

    async def create_user(self, data: Any) -> ServiceResult:
        """
        Create a new user

        Args:
            data: Decoded request body, expected to hold name and email

        Returns:
            ServiceResult with the created user, or a failed result carrying
            the underlying error message
        """
        try:
            user = await self.repository.create_user(data)
        except (ValidationError, DuplicateKeyError) as e:
            # Rejected input, not a server fault
            logger.warning(f"Create user rejected: {e}")
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="CREATE_FAILED"
            )
        except Exception as e:
            logger.error(f"Create user failed: {e}", exc_info=True)
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="CREATE_FAILED"
            )

        logger.info(f"Created user {user.id} ({user.email})")
        return ServiceResult(success=True, data=[user], count=1)


def get_users_service(request: Request) -> UsersService:
    """Get the users service owned by the running application"""
    return request.app.state.users_service
