from typing import Any, Dict
from bson import ObjectId
from bson.errors import InvalidId
from app.database.mongo import MongoDatabase
from app.utils.exceptions import JobNotFoundException

class JobQueryService:
    """단일 채용공고 조회"""

    @staticmethod
    async def get_job_by_id(job_id: str, database: MongoDatabase) -> Dict[str, Any]:
        """ID로 채용공고를 조회합니다. 형식이 잘못된 ID도 not found 로 처리합니다."""
        try:
            object_id = ObjectId(job_id)
        except (InvalidId, TypeError):
            raise JobNotFoundException(job_id)

        job = await database.jobs.find_one({"_id": object_id})
        if job is None:
            raise JobNotFoundException(job_id)
        return job
