from typing import Optional
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from app.config import settings
from app.utils.logger import db_logger

JOBS = "jobs"
SKILLS = "skills"
STATISTICS = "statistics"

class MongoDatabase:
    """프로세스 단위로 공유되는 MongoDB 접근 핸들.

    lifespan 에서 connect() 로 열고 close() 로 닫습니다.
    테스트에서는 이미 만들어진 클라이언트를 주입할 수 있으며, 이 경우 close() 는
    주입된 클라이언트를 닫지 않습니다.
    """

    def __init__(self, client=None, db_name: Optional[str] = None, uri: Optional[str] = None):
        self._uri = uri or settings.MONGO_URI
        self._db_name = db_name or settings.MONGO_DB_NAME
        self._client = client
        self._owns_client = client is None
        self._db: Optional[AsyncIOMotorDatabase] = None

    def connect(self) -> None:
        if self._db is not None:
            return
        if self._client is None:
            # motor 클라이언트는 첫 요청 시점에 실제 연결을 맺음
            self._client = AsyncIOMotorClient(self._uri)
        self._db = self._client[self._db_name]
        db_logger.info(f"MongoDB 연결 준비 완료: db={self._db_name}")

    def close(self) -> None:
        """MongoDB 연결을 안전하게 종료합니다."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
        self._db = None
        db_logger.info("MongoDB 연결 종료")

    @property
    def db(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise RuntimeError("MongoDatabase.connect() 가 호출되지 않았습니다.")
        return self._db

    @property
    def jobs(self) -> AsyncIOMotorCollection:
        return self.db[JOBS]

    @property
    def skills(self) -> AsyncIOMotorCollection:
        return self.db[SKILLS]

    @property
    def statistics(self) -> AsyncIOMotorCollection:
        return self.db[STATISTICS]

# 앱에 연결된 DB 핸들을 제공하는 의존성 함수
def get_database(request: Request) -> MongoDatabase:
    return request.app.state.database
