"""
User document and request/response models
"""

from beanie import Document, Indexed
from pydantic import BaseModel, ConfigDict, Field


class User(Document):
    """Stored user; email carries a unique index"""
    name: str
    email: Indexed(str, unique=True)

    class Settings:
        name = "users"


class UserCreate(BaseModel):
    """Fields a stored user must have"""
    name: str
    email: str


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
