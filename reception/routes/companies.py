"""
회사 관리 API 라우트
- 조회는 키오스크에서 사용 (인증 없음), 변경은 관리자 전용
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from reception.database import get_db
from reception.dependencies import get_current_admin
from reception.schemas.company import CompanyCreate, CompanyUpdate, CompanyResponse, CompanyListResponse
from reception.services.company_service import CompanyService

router = APIRouter(
    prefix="/api/companies",
    tags=["Companies"]
)


@router.get("", response_model=CompanyListResponse)
async def list_companies(db: Session = Depends(get_db)):
    """회사 목록 조회 (이름순)"""
    companies, total = CompanyService.get_all_companies(db)
    return {
        "total": total,
        "items": companies
    }


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
        company_id: int,
        db: Session = Depends(get_db)
):
    """회사 상세 조회"""
    return CompanyService.get_company_by_id(db, company_id)


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_admin)])
async def create_company(
        company_data: CompanyCreate,
        db: Session = Depends(get_db)
):
    """회사 등록"""
    return CompanyService.create_company(db, company_data)


@router.put("/{company_id}", response_model=CompanyResponse, dependencies=[Depends(get_current_admin)])
async def update_company(
        company_id: int,
        company_data: CompanyUpdate,
        db: Session = Depends(get_db)
):
    """회사 정보 수정"""
    return CompanyService.update_company(db, company_id, company_data)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_admin)])
async def delete_company(
        company_id: int,
        db: Session = Depends(get_db)
):
    """회사 삭제"""
    CompanyService.delete_company(db, company_id)
    return None
