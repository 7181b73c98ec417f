from pydantic import BaseModel, Field, ValidationError
from typing import Annotated, Any, Dict, List, Optional, Tuple, Union
from app.schemas.common import ObjectIdStr, PyObjectId
from app.schemas.skill import SkillResponse

class JobValidator(BaseModel):
    """채용공고 저장 전 검증 스키마 (payload + 인증된 userId 를 합친 레코드)"""
    title: str = Field(..., min_length=1, max_length=200, description="공고 제목")
    description: str = Field(..., min_length=1, description="공고 내용")
    company: Optional[str] = Field(None, description="회사명")
    location: Optional[str] = Field(None, description="근무지")
    salary: Optional[int] = Field(None, ge=0, description="연봉")
    employment_type: Optional[str] = Field(None, alias="employmentType", description="고용 형태")
    skills: List[ObjectIdStr] = Field(..., description="skills 컬렉션의 _id 목록")
    user_id: str = Field(..., alias="userId", min_length=1, description="작성자 ID")

    class Config:
        extra = "forbid"

def validate_job(data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ValidationError]]:
    """(value, error) 형태로 검증 결과를 반환합니다. error 가 있으면 value 는 None."""
    try:
        job = JobValidator.model_validate(data)
    except ValidationError as e:
        return None, e
    # 클라이언트가 보낸 필드만 저장
    return job.model_dump(by_alias=True, exclude_unset=True), None

# skills 는 $lookup 결과(스킬 문서) 또는 아직 조인되지 않은 ObjectId 일 수 있음
SkillRef = Annotated[Union[SkillResponse, PyObjectId], Field(union_mode="left_to_right")]

class JobResponse(BaseModel):
    id: PyObjectId = Field(..., alias="_id")
    title: Optional[str] = None
    description: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[int] = None
    employment_type: Optional[str] = Field(None, alias="employmentType")
    skills: List[SkillRef] = Field(default_factory=list)
    user_id: Optional[str] = Field(None, alias="userId")

    class Config:
        populate_by_name = True

class JobIdResponse(BaseModel):
    id: PyObjectId = Field(..., alias="_id")

    class Config:
        populate_by_name = True

class JobDetailResponse(BaseModel):
    job: JobResponse

class JobListResponse(BaseModel):
    jobs: List[JobResponse]
    count: int

class JobSearchResponse(BaseModel):
    """count 는 검색 조건에 맞는 전체 문서 수 (JobListResponse 의 count 는 전체 컬렉션 기준)"""
    searched_jobs: List[JobResponse] = Field(..., alias="searchedJobs")
    count: int

    class Config:
        populate_by_name = True
