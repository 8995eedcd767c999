"""
알림 메시지 템플릿 렌더링
- 토큰은 단순 문자열 치환이며 문법 검증은 하지 않음
- 토큰 이름마다 첫 번째 등장 위치만 치환 (두 번째부터는 그대로 남음)
"""
from typing import Mapping, Optional
from reception.models.staff_member import StaffMember

# 치환 순서 (고정)
TEMPLATE_TOKENS = (
    "visitor_name",
    "visitor_company_info",
    "visitor_company",
    "staff_name",
    "staff_chatwork_id",
    "staff_department",
)

DEFAULT_APPOINTMENT_TEMPLATE = (
    "[info][title]来客のお知らせ[/title]{visitor_name}様{visitor_company_info}が来社されました。\n\n"
    "担当: {staff_name}\n"
    "Chatwork: [To:{staff_chatwork_id}]\n\n"
    "応対をお願いいたします。[/info]"
)


def render_template(template: str, attributes: Mapping[str, str]) -> str:
    """템플릿의 인식 가능한 토큰을 속성 값으로 치환"""
    message = template
    for name in TEMPLATE_TOKENS:
        if name in attributes:
            message = message.replace("{" + name + "}", attributes[name], 1)
    return message


def visitor_attributes(visitor_name: str, visitor_company: Optional[str]) -> dict[str, str]:
    """방문자 관련 토큰 값"""
    company = visitor_company or ""
    return {
        "visitor_name": visitor_name,
        "visitor_company_info": f"（{company}）" if company else "",
        "visitor_company": company,
    }


def staff_attributes(staff: StaffMember) -> dict[str, str]:
    """담당자 관련 토큰 값 (없는 값은 빈 문자열)"""
    return {
        "staff_name": staff.name or "",
        "staff_chatwork_id": staff.chatwork_id or "",
        "staff_department": staff.department or "",
    }
