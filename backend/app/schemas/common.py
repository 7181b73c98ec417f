from typing import Annotated
from pydantic import BeforeValidator, Field

# MongoDB ObjectId 를 응답에서 문자열로 직렬화
PyObjectId = Annotated[str, BeforeValidator(str)]

# 클라이언트가 보내는 ObjectId 문자열 (24자리 hex)
OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"
ObjectIdStr = Annotated[str, Field(pattern=OBJECT_ID_PATTERN)]
