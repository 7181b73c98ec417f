from fastapi import APIRouter, Body, Depends, Query, status
from typing import Any, Dict, Optional
from app.config import settings
from app.database.mongo import MongoDatabase, get_database
from app.schemas.job import (
    JobDetailResponse,
    JobIdResponse,
    JobListResponse,
    JobResponse,
    JobSearchResponse,
)
from app.services.job_service import JobService
from app.utils.dependencies import get_current_user_id

router = APIRouter(prefix="/jobs", tags=["jobs"])

@router.get(
    "",
    response_model=JobListResponse,
    operation_id="list_jobs",
    summary="전체 채용공고 조회 (페이징)",
    description="""
    채용공고 목록을 skills 정보와 함께 조회합니다.\n
    - `skip`, `limit` 쿼리 파라미터로 페이지네이션이 가능합니다. (`limit=0` 은 제한 없음)\n
    - `count` 는 페이지와 무관한 전체 공고 수입니다.
    """
)
async def list_jobs(
    skip: int = Query(0, ge=0, description="건너뛸 공고 수"),
    limit: int = Query(settings.DEFAULT_LIMIT, ge=0, description="가져올 최대 공고 수"),
    database: MongoDatabase = Depends(get_database)
):
    return await JobService.list_jobs(database, skip, limit)

@router.get(
    "/search",
    response_model=JobSearchResponse,
    operation_id="search_jobs",
    summary="채용공고 제목 검색",
    description="""
    제목에 `title` 이 포함된 공고를 대소문자 구분 없이 검색합니다.\n
    - `title` 이 비어 있으면 전체 공고와 매칭됩니다.\n
    - `count` 는 검색 조건에 맞는 전체 공고 수입니다.
    """
)
async def search_jobs(
    title: Optional[str] = Query(None, description="검색할 제목 (부분 문자열)"),
    skip: int = Query(0, ge=0, description="건너뛸 공고 수"),
    limit: int = Query(settings.DEFAULT_LIMIT, ge=0, description="가져올 최대 공고 수"),
    database: MongoDatabase = Depends(get_database)
):
    return await JobService.search_jobs(database, title, skip, limit)

@router.get(
    "/{job_id}",
    response_model=JobDetailResponse,
    operation_id="get_job_by_id",
    summary="채용공고 상세 조회",
    description="`job_id` 형식이 잘못되었거나 공고가 없으면 모두 404 를 반환합니다."
)
async def get_job_by_id(
    job_id: str,
    database: MongoDatabase = Depends(get_database)
):
    return await JobService.get_job_by_id(database, job_id)

@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="create_job",
    summary="채용공고 등록",
    description="작성자(userId)는 인증 토큰에서 결정됩니다."
)
async def create_job(
    payload: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_current_user_id),
    database: MongoDatabase = Depends(get_database)
):
    return await JobService.create_job(database, payload, user_id)

@router.api_route(
    "/{job_id}",
    methods=["PUT", "PATCH"],
    response_model=JobResponse,
    summary="채용공고 수정",
    description="""
    본인이 작성한 공고만 수정할 수 있습니다.\n
    - 다른 사용자의 공고이거나 공고가 없으면 500 "No match job found" 를 반환합니다.
    """
)
async def update_job(
    job_id: str,
    payload: Dict[str, Any] = Body(...),
    user_id: str = Depends(get_current_user_id),
    database: MongoDatabase = Depends(get_database)
):
    return await JobService.update_job(database, job_id, payload, user_id)

@router.delete(
    "/{job_id}",
    response_model=JobIdResponse,
    operation_id="delete_job",
    summary="채용공고 삭제",
    description="본인이 작성한 공고만 삭제할 수 있습니다."
)
async def delete_job(
    job_id: str,
    user_id: str = Depends(get_current_user_id),
    database: MongoDatabase = Depends(get_database)
):
    return await JobService.delete_job(database, job_id, user_id)
