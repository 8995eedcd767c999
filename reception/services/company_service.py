"""
회사 관리 서비스
비즈니스 로직 계층
"""
from sqlalchemy.orm import Session
from typing import List
from reception.models.company import Company
from reception.models.staff_member import StaffMember
from reception.schemas.company import CompanyCreate, CompanyUpdate
from reception.utils.exceptions import NotFoundException


class CompanyService:
    """회사 관리 서비스"""

    @staticmethod
    def create_company(db: Session, company_data: CompanyCreate) -> Company:
        """회사 생성"""
        company = Company(**company_data.model_dump())
        db.add(company)
        db.commit()
        db.refresh(company)
        return company

    @staticmethod
    def get_company_by_id(db: Session, company_id: int) -> Company:
        """ID로 회사 조회"""
        company = db.query(Company).filter(Company.id == company_id).first()
        if not company:
            raise NotFoundException(detail=f"Company with ID {company_id} not found")
        return company

    @staticmethod
    def get_all_companies(db: Session) -> tuple[List[Company], int]:
        """전체 회사 조회 (이름순)"""
        companies = db.query(Company).order_by(Company.name).all()
        return companies, len(companies)

    @staticmethod
    def update_company(db: Session, company_id: int, company_data: CompanyUpdate) -> Company:
        """회사 정보 수정"""
        company = CompanyService.get_company_by_id(db, company_id)

        update_data = company_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(company, field, value)

        db.commit()
        db.refresh(company)
        return company

    @staticmethod
    def delete_company(db: Session, company_id: int) -> None:
        """회사 삭제 (소속 담당자는 미소속으로 변경)"""
        company = CompanyService.get_company_by_id(db, company_id)
        # 소속 담당자의 company_id 해제
        db.query(StaffMember).filter(StaffMember.company_id == company.id).update(
            {StaffMember.company_id: None}, synchronize_session=False
        )
        db.delete(company)
        db.commit()
