import re
from typing import Any, Dict, List, Optional
from bson import ObjectId
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from app.database.mongo import MongoDatabase, SKILLS
from app.schemas.job import validate_job
from app.services.job_query_service import JobQueryService
from app.utils.exceptions import (
    AppException,
    ErrorKind,
    NoMatchException,
    ServerErrorException,
    fallback_exception,
)
from app.utils.logger import app_logger

# jobs.skills(ObjectId 배열) -> skills 문서 배열로 치환
SKILLS_LOOKUP_STAGE = {
    "$lookup": {
        "from": SKILLS,
        "localField": "skills",
        "foreignField": "_id",
        "as": "skills",
    }
}

def build_page_stages(skip: int, limit: int) -> List[Dict[str, Any]]:
    """skip/limit 윈도우 스테이지. limit 0 은 커서와 동일하게 제한 없음."""
    stages: List[Dict[str, Any]] = []
    if skip > 0:
        stages.append({"$skip": skip})
    if limit > 0:
        stages.append({"$limit": limit})
    return stages

def build_title_filter(title: Optional[str]) -> Dict[str, Any]:
    """대소문자 구분 없는 부분 문자열 검색. 빈 문자열은 전체와 매칭."""
    return {"title": {"$regex": re.escape(title or ""), "$options": "i"}}

def to_object_ids(skill_ids: List[str]) -> List[ObjectId]:
    return [ObjectId(skill_id) for skill_id in skill_ids]

def as_request_validation_error(error: ValidationError) -> RequestValidationError:
    # 검증기에서 나온 에러를 그대로 전달 (validation_exception_handler 가 ErrorKind.VALIDATION 으로 응답)
    return RequestValidationError(error.errors(include_url=False, include_context=False))

class JobService:
    """채용공고 목록/검색/생성/수정/삭제"""

    @staticmethod
    async def list_jobs(database: MongoDatabase, skip: int, limit: int) -> Dict[str, Any]:
        try:
            pipeline = [SKILLS_LOOKUP_STAGE, *build_page_stages(skip, limit)]
            jobs = await database.jobs.aggregate(pipeline).to_list(length=None)
            # count 는 페이지와 무관한 전체 문서 수
            count = await database.jobs.count_documents({})

            app_logger.info(f"채용공고 조회 완료: {len(jobs)}건 / 전체 {count}건 (skip={skip}, limit={limit})")
            return {"jobs": jobs, "count": count}
        except Exception as e:
            app_logger.error(f"채용공고 조회 실패: {str(e)}")
            raise fallback_exception(ErrorKind.SERVER_FALLBACK, "Failed to fetch jobs", e) from e

    @staticmethod
    async def get_job_by_id(database: MongoDatabase, job_id: str) -> Dict[str, Any]:
        try:
            job = await JobQueryService.get_job_by_id(job_id, database)
        except AppException:
            app_logger.warning(f"채용공고를 찾을 수 없음: job_id={job_id}")
            raise
        except Exception as e:
            app_logger.error(f"채용공고 상세 조회 실패: job_id={job_id}, 오류: {str(e)}")
            raise fallback_exception(ErrorKind.NOT_FOUND, "Failed to fetch job", e) from e

        app_logger.info(f"채용공고 상세 조회 완료: job_id={job_id}")
        return {"job": job}

    @staticmethod
    async def search_jobs(
        database: MongoDatabase,
        title: Optional[str],
        skip: int,
        limit: int
    ) -> Dict[str, Any]:
        try:
            title_filter = build_title_filter(title)
            pipeline = [{"$match": title_filter}, SKILLS_LOOKUP_STAGE, *build_page_stages(skip, limit)]
            searched_jobs = await database.jobs.aggregate(pipeline).to_list(length=None)
            # list_jobs 와 달리 count 는 검색 조건에 맞는 문서 수
            count = await database.jobs.count_documents(title_filter)

            app_logger.info(f"채용공고 검색 완료: title={title!r} → {len(searched_jobs)}건 / 전체 {count}건")
            return {"searchedJobs": searched_jobs, "count": count}
        except Exception as e:
            app_logger.error(f"채용공고 검색 실패: title={title!r}, 오류: {str(e)}")
            raise fallback_exception(ErrorKind.SERVER_FALLBACK, "Failed to search jobs", e) from e

    @staticmethod
    async def create_job(database: MongoDatabase, payload: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        # userId 는 항상 인증된 사용자 기준 (payload 값은 덮어씀)
        job, error = validate_job({**payload, "userId": user_id})
        if error:
            app_logger.warning(f"채용공고 검증 실패: user_id={user_id}, 오류 {error.error_count()}건")
            raise as_request_validation_error(error)

        try:
            new_job = {**job, "skills": to_object_ids(job["skills"])}
            result = await database.jobs.insert_one(new_job)

            if not result or not result.acknowledged:
                raise ServerErrorException("Failed to create a new job.")

            app_logger.info(f"채용공고 등록 완료: job_id={result.inserted_id}, user_id={user_id}")
            return {"_id": result.inserted_id, **new_job}
        except AppException:
            raise
        except Exception as e:
            app_logger.error(f"채용공고 등록 실패: user_id={user_id}, 오류: {str(e)}")
            raise fallback_exception(ErrorKind.CLIENT_FALLBACK, "Failed to create a new job", e) from e

    @staticmethod
    async def update_job(
        database: MongoDatabase,
        job_id: str,
        payload: Dict[str, Any],
        user_id: str
    ) -> Dict[str, Any]:
        job, error = validate_job({**payload, "userId": user_id})
        if error:
            app_logger.warning(f"채용공고 검증 실패: job_id={job_id}, 오류 {error.error_count()}건")
            raise as_request_validation_error(error)

        try:
            updated_job = {**job, "skills": to_object_ids(job["skills"])}
            # 소유자 조건을 필터에 포함 → 다른 사용자의 공고는 매칭 0건
            result = await database.jobs.update_one(
                {"_id": ObjectId(job_id), "userId": user_id},
                {"$set": updated_job}
            )

            if not result:
                raise ServerErrorException("Failed to update job.")

            if result.matched_count == 0:
                app_logger.warning(f"수정할 채용공고 없음: job_id={job_id}, user_id={user_id}")
                raise NoMatchException("Failed to update job. No match job found!")

            app_logger.info(f"채용공고 수정 완료: job_id={job_id}, user_id={user_id}")
            return {"_id": job_id, **updated_job}
        except AppException:
            raise
        except Exception as e:
            app_logger.error(f"채용공고 수정 실패: job_id={job_id}, 오류: {str(e)}")
            raise fallback_exception(ErrorKind.CLIENT_FALLBACK, "Failed to update job", e) from e

    @staticmethod
    async def delete_job(database: MongoDatabase, job_id: str, user_id: str) -> Dict[str, Any]:
        try:
            result = await database.jobs.delete_one({"_id": ObjectId(job_id), "userId": user_id})

            if not result:
                raise ServerErrorException("Failed to delete job.")

            if result.deleted_count == 0:
                app_logger.warning(f"삭제할 채용공고 없음: job_id={job_id}, user_id={user_id}")
                raise NoMatchException("Failed to delete job. No match job found!")

            app_logger.info(f"채용공고 삭제 완료: job_id={job_id}, user_id={user_id}")
            return {"_id": job_id}
        except AppException:
            raise
        except Exception as e:
            app_logger.error(f"채용공고 삭제 실패: job_id={job_id}, 오류: {str(e)}")
            raise fallback_exception(ErrorKind.CLIENT_FALLBACK, "Failed to delete job", e) from e
