"""
담당자 관리 서비스
비즈니스 로직 계층
"""
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from reception.models.staff_member import StaffMember
from reception.schemas.staff import StaffMemberCreate, StaffMemberUpdate
from reception.services.company_service import CompanyService
from reception.utils.exceptions import NotFoundException


class StaffService:
    """담당자 관리 서비스"""

    @staticmethod
    def create_staff_member(db: Session, staff_data: StaffMemberCreate) -> StaffMember:
        """담당자 생성"""
        if staff_data.company_id is not None:
            CompanyService.get_company_by_id(db, staff_data.company_id)

        staff = StaffMember(**staff_data.model_dump())
        db.add(staff)
        db.commit()
        db.refresh(staff)
        return staff

    @staticmethod
    def get_staff_member_by_id(db: Session, staff_id: int) -> StaffMember:
        """ID로 담당자 조회"""
        staff = db.query(StaffMember).filter(StaffMember.id == staff_id).first()
        if not staff:
            raise NotFoundException(detail=f"Staff member with ID {staff_id} not found")
        return staff

    @staticmethod
    def get_staff_with_company(db: Session, staff_id: int) -> Optional[StaffMember]:
        """담당자와 소속 회사를 함께 조회 (없으면 None)"""
        return (
            db.query(StaffMember)
            .options(joinedload(StaffMember.company))
            .filter(StaffMember.id == staff_id)
            .first()
        )

    @staticmethod
    def get_all_staff_members(db: Session, company_id: Optional[int] = None) -> tuple[List[StaffMember], int]:
        """담당자 목록 조회 (이름순, 회사별 필터 지원)"""
        query = db.query(StaffMember)
        if company_id is not None:
            query = query.filter(StaffMember.company_id == company_id)
        staff_members = query.order_by(StaffMember.name).all()
        return staff_members, len(staff_members)

    @staticmethod
    def update_staff_member(db: Session, staff_id: int, staff_data: StaffMemberUpdate) -> StaffMember:
        """담당자 정보 수정"""
        staff = StaffService.get_staff_member_by_id(db, staff_id)

        update_data = staff_data.model_dump(exclude_unset=True)
        if update_data.get("company_id") is not None:
            CompanyService.get_company_by_id(db, update_data["company_id"])

        for field, value in update_data.items():
            setattr(staff, field, value)

        db.commit()
        db.refresh(staff)
        return staff

    @staticmethod
    def delete_staff_member(db: Session, staff_id: int) -> None:
        """담당자 삭제"""
        staff = StaffService.get_staff_member_by_id(db, staff_id)
        db.delete(staff)
        db.commit()
