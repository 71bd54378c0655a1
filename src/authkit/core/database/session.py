"""MongoDB client lifecycle and Beanie initialisation."""

import structlog
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from authkit.config import Settings, settings
from authkit.core.errors import ServiceUnavailableError


logger = structlog.get_logger()

_client: AsyncIOMotorClient | None = None


def get_client(config: Settings = settings) -> AsyncIOMotorClient:
    """Return the shared Motor client, creating it on first use."""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(str(config.mongodb_url), tz_aware=True)
    return _client


async def init_database(config: Settings = settings) -> None:
    """Register all document models with Beanie.

    Must run before any repository is used; creates indexes as needed.
    """
    from authkit.modules.tokens.models import Token
    from authkit.modules.users.models import User

    client = get_client(config)
    await init_beanie(
        database=client[config.mongodb_database],
        document_models=[User, Token],
    )
    logger.info("database_initialized", database=config.mongodb_database)


async def ping_database() -> None:
    """Round-trip a ping to the server.

    Raises:
        ServiceUnavailableError: If the server cannot be reached
    """
    try:
        await get_client().admin.command("ping")
    except PyMongoError as e:
        logger.warning("database_ping_failed", error=str(e))
        raise ServiceUnavailableError("Database connection failed") from e


def close_database() -> None:
    """Close the shared client if it was opened."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
