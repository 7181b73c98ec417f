from enum import Enum
from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional

class ErrorKind(str, Enum):
    """에러 종류 (HTTP 상태 코드는 ERROR_STATUS에서만 결정)"""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER = "server"
    CLIENT_FALLBACK = "client_fallback"   # create/update/delete 의 예기치 못한 오류
    SERVER_FALLBACK = "server_fallback"   # list/search 의 예기치 못한 오류
    UNAUTHORIZED = "unauthorized"

ERROR_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SERVER: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.CLIENT_FALLBACK: status.HTTP_400_BAD_REQUEST,
    ErrorKind.SERVER_FALLBACK: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}

class AppException(HTTPException):
    """애플리케이션 전용 예외 클래스"""
    def __init__(
        self,
        kind: ErrorKind,
        detail: str,
        error_code: Optional[str] = None,
        extra_data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        super().__init__(status_code=ERROR_STATUS[kind], detail=detail, headers=headers)
        self.kind = kind
        self.error_code = error_code
        self.extra_data = extra_data or {}

def create_error_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    extra_data: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """일관된 에러 응답 포맷 생성"""
    response = {
        "success": False,
        "error": {
            "code": error_code or f"ERR_{status_code}",
            "message": message
        }
    }

    if extra_data:
        response["error"]["details"] = extra_data

    return response

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.status_code, exc.detail, exc.error_code, exc.extra_data),
        headers=exc.headers,
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 검증 에러는 FastAPI 기본 형태({"detail": [...]}) 그대로, 상태 코드만 ERROR_STATUS 기준
    return JSONResponse(
        status_code=ERROR_STATUS[ErrorKind.VALIDATION],
        content={"detail": jsonable_encoder(exc.errors())},
    )

# 자주 사용되는 에러들
class NotFoundException(AppException):
    def __init__(self, resource: str, detail: Optional[str] = None):
        super().__init__(
            ErrorKind.NOT_FOUND,
            detail=detail or f"{resource} not found.",
            error_code="NOT_FOUND"
        )

class JobNotFoundException(NotFoundException):
    """잘못된 형식의 ID와 존재하지 않는 ID를 구분하지 않음"""
    def __init__(self, job_id: str):
        super().__init__("Job", f"Job with id '{job_id}' not found.")

class NoMatchException(AppException):
    """소유자 조건 필터로 인해 매칭된 문서가 없는 경우 (not found / forbidden 구분 없음)"""
    def __init__(self, message: str):
        super().__init__(ErrorKind.SERVER, detail=message, error_code="NO_MATCH")

class ServerErrorException(AppException):
    def __init__(self, message: str = "Internal server error."):
        super().__init__(ErrorKind.SERVER, detail=message, error_code="INTERNAL_ERROR")

class BadRequestException(AppException):
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(
            ErrorKind.CLIENT_FALLBACK,
            detail=message,
            error_code=error_code or "BAD_REQUEST"
        )

class UnauthorizedException(AppException):
    def __init__(self, message: str = "Could not validate credentials."):
        super().__init__(
            ErrorKind.UNAUTHORIZED,
            detail=message,
            error_code="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"}
        )

def fallback_exception(kind: ErrorKind, message: str, error: Exception) -> AppException:
    """작업 경계에서 잡힌 예기치 못한 오류를 해당 작업의 기본 에러로 변환"""
    return AppException(kind, detail=f"{message}: {error}", error_code=kind.value.upper())
