"""Tests for the Streamlit UI: render helpers and a page-level smoke test."""

import pytest

from src.expenseflow.expenses import SEED_EXPENSES, ExpenseResult, ExpenseStatus
from src.expenseflow.flows.tracking import NO_MATCHES_TEXT
from ui.components import bullet_list, compliance_badges, escape_markdown, status_badge
from ui.sections.tracking import expense_table_markdown


def test_status_badges():
    assert status_badge(ExpenseStatus.APPROVED) == ":green-badge[Approved]"
    assert status_badge(ExpenseStatus.REJECTED) == ":red-badge[Rejected]"
    assert status_badge(ExpenseStatus.PENDING_APPROVAL) == ":gray-badge[Pending Approval]"


def test_compliance_badges():
    compliant = ExpenseResult.model_validate({"policy_validation": {"is_compliant": True}})
    assert compliance_badges(compliant) == [":green-badge[✔ Compliant]"]

    flagged = ExpenseResult.model_validate(
        {"policy_validation": {"is_compliant": False, "approval_required": True}}
    )
    badges = compliance_badges(flagged)
    assert badges[0] == ":red-badge[✖ Non-Compliant]"
    assert "Approval Required" in badges[1]


def test_escape_markdown():
    assert escape_markdown("Amount $450 exceeds $300 limit") == r"Amount \$450 exceeds \$300 limit"
    assert escape_markdown("*Joe's* [cafe](x) #1") == r"\*Joe's\* \[cafe\](x) \#1"
    assert escape_markdown("plain text") == "plain text"


def test_bullet_list_escapes_items():
    assert bullet_list(["$5 tip", "a_b"]) == "- \\$5 tip\n- a\\_b"


def test_expense_table_rows():
    table = expense_table_markdown(SEED_EXPENSES[:2])
    lines = table.splitlines()
    assert len(lines) == 4
    assert "ABC Airlines" in lines[2] and "$450.00" in lines[2]
    assert ":gray-badge[Pending Approval]" in lines[3]


def test_expense_table_empty():
    table = expense_table_markdown([])
    assert NO_MATCHES_TEXT in table
    assert len(table.splitlines()) == 3


@pytest.fixture
def app(project_root):
    from streamlit.testing.v1 import AppTest

    at = AppTest.from_file(str(project_root / "ui" / "app.py"), default_timeout=30)
    at.run()
    return at


def test_app_renders_all_tabs(app):
    assert not app.exception
    assert len(app.tabs) == 3
    assert "Showing 5 of 5 expenses" in [c.value for c in app.caption]


def test_tracking_filters_to_empty(app):
    app.selectbox(key="status_filter").set_value("Rejected")
    app.selectbox(key="category_filter").set_value("Travel")
    app.run()

    assert not app.exception
    assert "Showing 0 of 5 expenses" in [c.value for c in app.caption]
    assert any(NO_MATCHES_TEXT in m.value for m in app.markdown)


def _render_result(payload):
    from src.expenseflow.expenses import ExpenseResult
    from ui.components import display_expense_result

    display_expense_result(ExpenseResult.model_validate(payload))


def _render_result_app(payload):
    from streamlit.testing.v1 import AppTest

    at = AppTest.from_function(_render_result, args=(payload,), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_compliant_result_has_no_violation_box():
    at = _render_result_app({
        "expense_details": {"vendor": "ABC Cafe", "amount": 42.5, "currency": "USD"},
        "policy_validation": {"is_compliant": True},
    })
    assert len(at.error) == 0
    assert len(at.warning) == 0
    assert any("Compliant" in m.value for m in at.markdown)
    assert "Your expense has been validated" in [c.value for c in at.caption]


def test_violations_listed_in_order():
    at = _render_result_app({
        "policy_validation": {"is_compliant": False, "violations": ["a", "b"], "warnings": ["late"]},
    })
    assert len(at.error) == 1
    body = at.error[0].value
    assert body.startswith("**Violations:**")
    assert body.index("- a") < body.index("- b")
    assert "- late" in at.warning[0].value


def test_agent_text_is_escaped_when_rendered():
    at = _render_result_app({
        "expense_details": {"vendor": "Joe's *Diner*", "amount": "$450"},
        "policy_validation": {"is_compliant": False, "violations": ["Amount $450 exceeds $300 limit"]},
    })
    assert r"Amount \$450 exceeds \$300 limit" in at.error[0].value
    assert any(r"Joe's \*Diner\*" in m.value for m in at.markdown)
