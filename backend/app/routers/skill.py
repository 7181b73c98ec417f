from fastapi import APIRouter, Depends, status
from typing import List
from app.database.mongo import MongoDatabase, get_database
from app.schemas.skill import SkillCreate, SkillResponse
from app.utils.dependencies import get_current_user_id
from app.utils.exceptions import AppException, BadRequestException, ErrorKind, fallback_exception
from app.utils.logger import app_logger

router = APIRouter(prefix="/skills", tags=["skills"])

@router.get(
    "",
    response_model=List[SkillResponse],
    summary="전체 기술 스택 조회",
    description="등록된 모든 기술 스택을 조회합니다."
)
async def list_all_skills(
    database: MongoDatabase = Depends(get_database)
):
    try:
        skills = await database.skills.find({}).to_list(length=None)
        app_logger.info(f"기술 스택 조회 완료: {len(skills)}건")
        return skills
    except Exception as e:
        app_logger.error(f"기술 스택 조회 실패: {str(e)}")
        raise fallback_exception(ErrorKind.SERVER_FALLBACK, "Failed to fetch skills", e) from e

@router.post(
    "",
    response_model=SkillResponse,
    status_code=status.HTTP_201_CREATED,
    summary="새로운 기술 스택 등록",
    description="새로운 기술 스택을 등록합니다. 같은 이름이 이미 있으면 400 을 반환합니다."
)
async def create_skill(
    skill: SkillCreate,
    database: MongoDatabase = Depends(get_database),
    user_id: str = Depends(get_current_user_id)
):
    try:
        # 중복 체크
        existing_skill = await database.skills.find_one({"name": skill.name})
        if existing_skill:
            raise BadRequestException("Skill already exists.", error_code="DUPLICATE_SKILL")

        new_skill = skill.model_dump()
        result = await database.skills.insert_one(new_skill)

        app_logger.info(f"새로운 기술 스택 등록 완료: {skill.name} (user_id={user_id})")
        return {"_id": result.inserted_id, **new_skill}
    except AppException:
        raise
    except Exception as e:
        app_logger.error(f"기술 스택 등록 실패: {str(e)}")
        raise fallback_exception(ErrorKind.SERVER_FALLBACK, "Failed to create skill", e) from e
