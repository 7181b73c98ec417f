from typing import Any, Dict, List
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import UpdateOne
from app.database.mongo import MongoDatabase
from app.utils.exceptions import ErrorKind, NotFoundException, fallback_exception
import logging

logger = logging.getLogger(__name__)

class StatisticsService:
    """스킬별 사용 횟수 통계를 관리하는 서비스 클래스"""

    @staticmethod
    async def add_skills(database: MongoDatabase, skill_ids: List[str]) -> Dict[str, Any]:
        """스킬 사용 횟수를 1씩 증가시킵니다. 통계 문서가 없으면 새로 만듭니다.

        remove_skills 와 마찬가지로 같은 요청 안의 중복 ID 는 한 번만 증가합니다.
        """
        try:
            unique_ids = list(dict.fromkeys(skill_ids))
            operations = [
                UpdateOne({"skill": ObjectId(skill_id)}, {"$inc": {"count": 1}}, upsert=True)
                for skill_id in unique_ids
            ]
            # 한 번의 bulk_write 로 전송
            result = await database.statistics.bulk_write(operations, ordered=False)

            logger.info(f"스킬 통계 증가 완료: {len(unique_ids)}건 (신규 {result.upserted_count}건)")
            return {
                "skills": skill_ids,
                "matched": result.matched_count,
                "upserted": result.upserted_count,
            }
        except Exception as e:
            logger.error(f"스킬 통계 증가 실패: {str(e)}")
            raise fallback_exception(ErrorKind.SERVER_FALLBACK, "Failed to add skills to statistics", e) from e

    @staticmethod
    async def get_by_skill_id(database: MongoDatabase, skill_id: str) -> Dict[str, Any]:
        try:
            statistic = await database.statistics.find_one({"skill": ObjectId(skill_id)})
        except (InvalidId, TypeError):
            statistic = None
        except Exception as e:
            logger.error(f"스킬 통계 조회 실패: skill_id={skill_id}, 오류: {str(e)}")
            raise fallback_exception(ErrorKind.NOT_FOUND, "Failed to fetch statistic", e) from e

        if statistic is None:
            raise NotFoundException("Statistic", f"Statistic for skill '{skill_id}' not found.")
        return {"statistic": statistic}

    @staticmethod
    async def remove_skills(database: MongoDatabase, skill_ids: List[str]) -> Dict[str, Any]:
        """스킬 사용 횟수를 1씩 감소시키고, 0 이하가 된 통계 문서는 삭제합니다.

        같은 요청 안의 중복 ID 는 한 번만 감소합니다.
        """
        try:
            object_ids = [ObjectId(skill_id) for skill_id in skill_ids]
            updated = await database.statistics.update_many(
                {"skill": {"$in": object_ids}},
                {"$inc": {"count": -1}}
            )
            removed = await database.statistics.delete_many(
                {"skill": {"$in": object_ids}, "count": {"$lte": 0}}
            )

            logger.info(f"스킬 통계 감소 완료: 감소 {updated.modified_count}건, 삭제 {removed.deleted_count}건")
            return {
                "skills": skill_ids,
                "modified": updated.modified_count,
                "removed": removed.deleted_count,
            }
        except Exception as e:
            logger.error(f"스킬 통계 감소 실패: {str(e)}")
            raise fallback_exception(ErrorKind.SERVER_FALLBACK, "Failed to remove skills from statistics", e) from e
