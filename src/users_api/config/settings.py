"""
Configuration settings for the Users API
"""

import os
import logging

logger = logging.getLogger(__name__)

# Database configuration
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/users_api")
MONGODB_DEFAULT_DATABASE = "users_api"  # Used when the URI has no database path
MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", 5000))
USER_REPOSITORY = os.getenv("USER_REPOSITORY", "mongodb").lower()  # mongodb or inmemory

# Server configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 5000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "").split(",") if origin.strip()
]

if USER_REPOSITORY not in ("mongodb", "inmemory"):
    raise ValueError(f"Invalid USER_REPOSITORY value: {USER_REPOSITORY}. Expected 'mongodb' or 'inmemory'")

if USER_REPOSITORY == "inmemory":
    logger.warning("USER_REPOSITORY=inmemory - users will not be persisted")
