from fastapi import APIRouter, Depends
from app.database.mongo import MongoDatabase, get_database
from app.schemas.statistic import (
    StatisticAddResponse,
    StatisticDetailResponse,
    StatisticRemoveResponse,
    StatisticSkillsRequest,
)
from app.services.statistics_service import StatisticsService

router = APIRouter(prefix="/statistics", tags=["statistics"])

@router.post(
    "",
    response_model=StatisticAddResponse,
    summary="스킬 사용 횟수 증가",
    description="전달된 skill 들의 사용 횟수를 1씩 증가시킵니다."
)
async def add_skills_to_statistics(
    body: StatisticSkillsRequest,
    database: MongoDatabase = Depends(get_database)
):
    return await StatisticsService.add_skills(database, body.skills)

@router.post(
    "/delete",
    response_model=StatisticRemoveResponse,
    summary="스킬 사용 횟수 감소",
    description="전달된 skill 들의 사용 횟수를 1씩 감소시키고, 0 이 된 통계는 삭제합니다."
)
async def remove_skills(
    body: StatisticSkillsRequest,
    database: MongoDatabase = Depends(get_database)
):
    return await StatisticsService.remove_skills(database, body.skills)

@router.get(
    "/{skill_id}",
    response_model=StatisticDetailResponse,
    summary="스킬 통계 조회"
)
async def get_statistic_by_skill_id(
    skill_id: str,
    database: MongoDatabase = Depends(get_database)
):
    return await StatisticsService.get_by_skill_id(database, skill_id)
