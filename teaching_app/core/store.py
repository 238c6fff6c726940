"""Document store - the four collections behind the API"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient

from teaching_app.core.config import Settings

logger = logging.getLogger(__name__)

class Store:
    """Holds the Mongo client and the collections used by the routes

    One instance is created per process in the application lifespan and
    handed to endpoints through ``Depends(get_store)``.
    """

    CLASSES = "classes"
    SELECTED = "selected"
    USERS = "users"
    PAYMENTS = "payments"

    def __init__(self, client: AsyncIOMotorClient, database_name: str):
        self.client = client
        self.db = client[database_name]

        self.classes = self.db[self.CLASSES]
        self.selected = self.db[self.SELECTED]
        self.users = self.db[self.USERS]
        self.payments = self.db[self.PAYMENTS]

        logger.debug(f"Store bound to database '{database_name}'")

    @classmethod
    def connect(cls, settings: Settings) -> "Store":
        """Create a Motor client from settings and bind the collections"""
        client = AsyncIOMotorClient(settings.mongo_uri)
        return cls(client, settings.DATABASE_NAME)

    async def ping(self) -> None:
        """Send a ping to confirm a successful connection"""
        await self.client.admin.command("ping")
        logger.info("✓ Pinged your deployment. You successfully connected to MongoDB!")

    def close(self) -> None:
        self.client.close()
        logger.info("✓ Database client closed")
