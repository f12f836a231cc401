from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from scrolljob.config import settings
from scrolljob.models import DOCUMENT_MODELS
from scrolljob.utils.logger import db_logger

async def init_mongo() -> AsyncIOMotorClient:
    """Connects to MongoDB and binds the beanie documents (creating indexes)."""
    client = AsyncIOMotorClient(settings.MONGO_URI, tz_aware=True)
    await init_beanie(
        database=client[settings.MONGO_DB_NAME],
        document_models=DOCUMENT_MODELS,
    )
    db_logger.info("MongoDB connected", extra={"context": {"database": settings.MONGO_DB_NAME}})
    return client

async def close_mongo(client: AsyncIOMotorClient) -> None:
    """Closes the MongoDB connection"""
    if client:
        client.close()
        db_logger.info("MongoDB disconnected")

async def ping_mongo(client: AsyncIOMotorClient) -> bool:
    """True when the server answers a ping."""
    if client is None:
        return False
    try:
        await client.admin.command("ping")
        return True
    except Exception as e:
        db_logger.error("MongoDB error", extra={"context": {"error": str(e)}})
        return False
