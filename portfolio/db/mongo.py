import logging
from typing import Optional
from urllib.parse import urlsplit

import motor.motor_asyncio

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "portfolio"


def mask_mongo_uri(uri: str) -> str:
    """Replace the password in a MongoDB connection string with asterisks."""
    if '@' not in uri or '://' not in uri:
        return uri
    scheme, rest = uri.split('://', 1)
    credentials, host_part = rest.rsplit('@', 1)
    if ':' not in credentials:
        return uri
    user, password = credentials.split(':', 1)
    return f"{scheme}://{user}:{'*' * len(password)}@{host_part}"


def database_name_from_uri(uri: str) -> str:
    """Database name from the path of the URI, or the default one."""
    path = urlsplit(uri).path.strip('/')
    return path or DEFAULT_DB_NAME


class MongoConnection:
    """Owns the MongoDB client for the lifetime of the application.

    Created at startup, closed at shutdown. A failed connection is logged and
    does not stop the application from serving pages.
    """

    def __init__(self, uri: str):
        self.uri = uri
        self.db_name = database_name_from_uri(uri)
        self.client: Optional[motor.motor_asyncio.AsyncIOMotorClient] = None
        self.db = None

    async def connect(self) -> bool:
        logger.info(f"MongoDB URI configured: {mask_mongo_uri(self.uri)}")
        self.client = motor.motor_asyncio.AsyncIOMotorClient(
            self.uri,
            maxPoolSize=10,
            minPoolSize=0,
            maxIdleTimeMS=30000,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=10000
        )
        self.db = self.client[self.db_name]

        try:
            await self.client.admin.command('ping')
            logger.info(f"MongoDB connected successfully to database: {self.db_name}")
            return True
        except Exception as e:
            logger.error(f"MongoDB connection error: {str(e)}")
            return False

    def close(self) -> None:
        if self.client is None:
            return
        self.client.close()
        self.client = None
        self.db = None
        logger.info("MongoDB connection closed")
