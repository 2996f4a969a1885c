"""
User API routes
"""

import logging
from typing import Any, List
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from users_api.models.user import UserResponse
from users_api.services.users_service import UsersService, get_users_service

router = APIRouter()
logger = logging.getLogger(__name__)

CREATE_FAILED = "Failed to create user"


def create_failed_response(details: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": CREATE_FAILED, "details": details})


async def read_json_body(request: Request) -> Any:
    """
    Parse a JSON request body

    Bodies that are empty or not sent as JSON are read as an empty object,
    so their missing fields are reported by the store.

    Raises:
        ValueError: If a JSON body cannot be decoded
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type != "application/json" and not content_type.endswith("+json"):
        return {}

    body = await request.body()
    if not body.strip():
        return {}
    return await request.json()


@router.get("", response_model=List[UserResponse])
async def list_users(users_service: UsersService = Depends(get_users_service)):
    """List every user"""
    result = await users_service.list_users()
    return result.data


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    request: Request,
    users_service: UsersService = Depends(get_users_service)
):
    """Create a new user from a JSON body with name and email"""
    try:
        data = await read_json_body(request)
    except ValueError as e:
        logger.warning(f"Rejected create user request with invalid JSON: {e}")
        return create_failed_response(f"Invalid JSON body: {e}")

    result = await users_service.create_user(data)

    if not result.success:
        return create_failed_response(result.error)

    return result.data[0]
