# 기술 항목 관련 스키마

from pydantic import BaseModel, Field
from typing import Optional
from app.schemas.common import PyObjectId

class SkillCreate(BaseModel):
    name: str = Field(..., min_length=1, description="스킬 이름")
    category: Optional[str] = Field(None, description="카테고리")

class SkillResponse(BaseModel):
    id: PyObjectId = Field(..., alias="_id")
    name: str
    category: Optional[str] = None

    class Config:
        populate_by_name = True
