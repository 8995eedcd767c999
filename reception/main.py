import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from reception.config import settings
from reception.database import engine, init_db
from reception.routes.auth import router as auth_router
from reception.routes.companies import router as companies_router
from reception.routes.staff import router as staff_router
from reception.routes.notifications import router as notifications_router
from reception.routes.settings import router as settings_router
from reception.routes.logs import router as logs_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작: 데이터베이스 테이블 생성
    init_db(engine)
    logger.info("Database initialized")
    yield
    logger.info("Application shutdown")


app = FastAPI(
    title=settings.app_name,
    description="방문자 접수 키오스크 API",
    version=APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# CORS 미들웨어 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 헬스체크 엔드포인트
@app.get("/api/health")
async def health_check():
    """애플리케이션 상태 확인"""
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": APP_VERSION
    }


# 라우터 등록
app.include_router(auth_router)
app.include_router(companies_router)
app.include_router(staff_router)
app.include_router(notifications_router)
app.include_router(settings_router)
app.include_router(logs_router)


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Welcome to Visitor Reception Kiosk API",
        "docs": "/api/docs",
        "openapi": "/api/openapi.json"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "reception.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
