from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
from app.config import settings
from app.database.mongo import MongoDatabase
from app.routers import job, skill, statistics
from app.utils.exceptions import (
    AppException,
    app_exception_handler,
    create_error_response,
    validation_exception_handler,
)
from app.utils.logger import app_logger

def create_app(database: Optional[MongoDatabase] = None) -> FastAPI:
    database = database or MongoDatabase()

    # 앱 시작 시 MongoDB 핸들 준비, 종료 시 정리
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.connect()
        app.state.database = database
        app_logger.info("Jobs API 시작")
        yield
        database.close()
        app_logger.info("Jobs API 종료")

    app = FastAPI(
        title="Jobs API",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # 처리되지 않은 모든 예외도 JSON 으로 응답
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        app_logger.error(f"처리되지 않은 예외: {request.method} {request.url.path} - {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content=create_error_response(500, f"Internal server error: {type(exc).__name__}"),
        )

    @app.get("/")
    async def root():
        """API 루트 경로"""
        return {
            "message": "Jobs API",
            "version": "1.0.0",
            "docs": "/docs"
        }

    # 라우터 등록
    app.include_router(job.router)
    app.include_router(skill.router)
    app.include_router(statistics.router)

    return app

app = create_app()
