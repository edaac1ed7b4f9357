from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.server_api import ServerApi
from app.config import Settings, settings as default_settings
from app.utils.logger import mongo_logger


class MongoGateway:
    """
    프로세스 전체에서 공유하는 MongoDB 연결 핸들.
    lifespan에서 connect()/shutdown()을 호출하고, 라우터에는 get_mongo 의존성으로 주입됨.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.client: Optional[AsyncIOMotorClient] = None

    async def connect(self) -> "MongoGateway":
        """클라이언트 생성 후 ping으로 접속 확인. 실패하면 예외를 그대로 올려 기동을 중단시킴"""
        if self.client is not None:
            return self

        client = AsyncIOMotorClient(
            self.settings.mongo_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        try:
            await client.admin.command("ping")
        except Exception:
            client.close()
            raise

        self.client = client
        mongo_logger.info(f"Connected to MongoDB (db={self.settings.MONGO_DB_NAME})")
        return self

    async def shutdown(self) -> None:
        """MongoDB 연결을 안전하게 종료합니다."""
        if self.client is None:
            return
        self.client.close()
        self.client = None
        mongo_logger.info("MongoDB connection closed")

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    def _collection(self, name: str) -> AsyncIOMotorCollection:
        if self.client is None:
            raise RuntimeError("MongoGateway is not connected")
        return self.client[self.settings.MONGO_DB_NAME][name]

    @property
    def jobs(self) -> AsyncIOMotorCollection:
        return self._collection(self.settings.JOBS_COLLECTION)

    @property
    def job_applications(self) -> AsyncIOMotorCollection:
        return self._collection(self.settings.APPLICATIONS_COLLECTION)
