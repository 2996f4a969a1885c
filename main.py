"""
Entry point for the Users API
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

import uvicorn

from users_api.config.settings import HOST, PORT, LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def main():
    """Start the server; exits non-zero if the database is unreachable at startup"""
    logger.info(f"Starting Users API on port {PORT}")
    uvicorn.run("users_api.app:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
