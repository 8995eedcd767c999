"""
감사 로그 조회 API 라우트 (관리자 전용)
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from reception.database import get_db
from reception.dependencies import get_current_admin
from reception.schemas.log import VisitorLogListResponse, ErrorLogListResponse
from reception.services.log_service import LogService

router = APIRouter(
    prefix="/api/logs",
    tags=["Logs"],
    dependencies=[Depends(get_current_admin)]
)


@router.get("/visitors", response_model=VisitorLogListResponse)
async def list_visitor_logs(
        db: Session = Depends(get_db),
        skip: int = Query(0, ge=0),
        limit: int = Query(100, ge=1, le=1000)
):
    """방문 기록 조회 (최신순)"""
    visitor_logs, total = LogService.get_visitor_logs(db, skip, limit)
    return {
        "total": total,
        "items": visitor_logs
    }


@router.get("/errors", response_model=ErrorLogListResponse)
async def list_error_logs(
        db: Session = Depends(get_db),
        skip: int = Query(0, ge=0),
        limit: int = Query(100, ge=1, le=1000)
):
    """에러 로그 조회 (최신순)"""
    error_logs, total = LogService.get_error_logs(db, skip, limit)
    return {
        "total": total,
        "items": error_logs
    }
