from pydantic import BaseModel, Field
from typing import List
from app.schemas.common import ObjectIdStr, PyObjectId

class StatisticSkillsRequest(BaseModel):
    skills: List[ObjectIdStr] = Field(..., min_length=1, description="카운트를 변경할 skill _id 목록")

class StatisticResponse(BaseModel):
    id: PyObjectId = Field(..., alias="_id")
    skill: PyObjectId
    count: int

    class Config:
        populate_by_name = True

class StatisticDetailResponse(BaseModel):
    statistic: StatisticResponse

class StatisticAddResponse(BaseModel):
    skills: List[str]
    matched: int
    upserted: int

class StatisticRemoveResponse(BaseModel):
    skills: List[str]
    modified: int
    removed: int
