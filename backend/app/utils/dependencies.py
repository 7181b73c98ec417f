from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from typing import Optional
from app.core.security import decode_access_token
from app.utils.exceptions import UnauthorizedException
from app.utils.logger import auth_logger

# 토큰 발급은 외부 인증 서버 담당
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/token", auto_error=False)

# JWT 토큰에서 현재 사용자 ID 가져오기 (요청 body 는 절대 참조하지 않음)
def get_current_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    if not token:
        raise UnauthorizedException("Not authenticated.")
    try:
        payload = decode_access_token(token)
    except JWTError as e:
        auth_logger.warning(f"토큰 검증 실패: {str(e)}")
        raise UnauthorizedException()

    user_id = payload.get("sub")
    if user_id is None:
        raise UnauthorizedException()
    return str(user_id)
