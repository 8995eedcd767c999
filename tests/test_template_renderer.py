from types import SimpleNamespace

from reception.services.template_renderer import (
    DEFAULT_APPOINTMENT_TEMPLATE,
    render_template,
    staff_attributes,
    visitor_attributes,
)


def test_template_without_tokens_is_unchanged():
    template = "[info]Someone is here[/info] {unknown} {{visitor}}"
    assert render_template(template, visitor_attributes("Taro", "Acme")) == template


def test_company_info_wraps_company_in_fullwidth_parentheses():
    result = render_template("{visitor_name}{visitor_company_info}", visitor_attributes("Hanako", "Acme"))
    assert result == "Hanako（Acme）"


def test_company_info_is_empty_without_company():
    assert render_template("{visitor_name}{visitor_company_info}", visitor_attributes("Hanako", None)) == "Hanako"
    assert render_template("[{visitor_company}]", visitor_attributes("Hanako", "")) == "[]"


def test_only_first_occurrence_of_each_token_is_replaced():
    result = render_template("{visitor_name} / {visitor_name}", visitor_attributes("Taro", None))
    assert result == "Taro / {visitor_name}"


def test_tokens_are_case_sensitive():
    result = render_template("{Visitor_Name} {visitor_name}", visitor_attributes("Taro", None))
    assert result == "{Visitor_Name} Taro"


def test_staff_tokens_left_verbatim_without_staff_attributes():
    result = render_template("{visitor_name} -> {staff_name}", visitor_attributes("Taro", None))
    assert result == "Taro -> {staff_name}"


def test_staff_attributes_use_empty_string_for_missing_values():
    staff = SimpleNamespace(name="Suzuki", chatwork_id=None, department=None)
    attributes = visitor_attributes("Taro", None)
    attributes.update(staff_attributes(staff))

    result = render_template("{staff_name}|{staff_chatwork_id}|{staff_department}", attributes)

    assert result == "Suzuki||"


def test_default_template_renders_mention():
    staff = SimpleNamespace(name="Suzuki", chatwork_id="123", department="Sales")
    attributes = visitor_attributes("Taro", "Acme")
    attributes.update(staff_attributes(staff))

    result = render_template(DEFAULT_APPOINTMENT_TEMPLATE, attributes)

    assert "Taro様（Acme）が来社されました。" in result
    assert "担当: Suzuki" in result
    assert "[To:123]" in result


def test_rendering_is_deterministic():
    attributes = visitor_attributes("Taro", "Acme")
    template = "{visitor_company_info}{visitor_name}{visitor_company}"
    assert render_template(template, attributes) == render_template(template, attributes)
