"""
담당자 관리 API 라우트
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
from reception.database import get_db
from reception.dependencies import get_current_admin
from reception.schemas.staff import (
    StaffMemberCreate,
    StaffMemberUpdate,
    StaffMemberResponse,
    StaffMemberListResponse
)
from reception.services.staff_service import StaffService

router = APIRouter(
    prefix="/api/staff",
    tags=["Staff"]
)


@router.get("", response_model=StaffMemberListResponse)
async def list_staff_members(
        db: Session = Depends(get_db),
        company_id: Optional[int] = Query(None)
):
    """
    담당자 목록 조회 (이름순)
    - company_id가 있으면 해당 회사 소속만 조회합니다.
    """
    staff_members, total = StaffService.get_all_staff_members(db, company_id)
    return {
        "total": total,
        "items": staff_members
    }


@router.get("/{staff_id}", response_model=StaffMemberResponse)
async def get_staff_member(
        staff_id: int,
        db: Session = Depends(get_db)
):
    """담당자 상세 조회"""
    return StaffService.get_staff_member_by_id(db, staff_id)


@router.post("", response_model=StaffMemberResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_admin)])
async def create_staff_member(
        staff_data: StaffMemberCreate,
        db: Session = Depends(get_db)
):
    """담당자 등록"""
    return StaffService.create_staff_member(db, staff_data)


@router.put("/{staff_id}", response_model=StaffMemberResponse, dependencies=[Depends(get_current_admin)])
async def update_staff_member(
        staff_id: int,
        staff_data: StaffMemberUpdate,
        db: Session = Depends(get_db)
):
    """담당자 정보 수정"""
    return StaffService.update_staff_member(db, staff_id, staff_data)


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_admin)])
async def delete_staff_member(
        staff_id: int,
        db: Session = Depends(get_db)
):
    """담당자 삭제"""
    StaffService.delete_staff_member(db, staff_id)
    return None
