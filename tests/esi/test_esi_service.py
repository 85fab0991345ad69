from __future__ import annotations

import pytest

from src.timesheet_payroll.timesheet_payroll.core.enums import PaymentStatus
from src.timesheet_payroll.timesheet_payroll.core.exceptions import AuthorizationError, ValidationError
from src.timesheet_payroll.timesheet_payroll.esi.calculator import EsiCalculator
from tests.fakes import make_employee

MONTH = "2024-06"


def test_eligibility_uses_flag_and_inclusive_threshold():
    calc = EsiCalculator()
    assert calc.is_eligible(esi_flag=True, monthly_salary=21000)
    assert not calc.is_eligible(esi_flag=True, monthly_salary=21000.01)
    assert not calc.is_eligible(esi_flag=False, monthly_salary=15000)


def test_amount_is_rate_on_gross_rounded_to_paisa():
    calc = EsiCalculator()
    assert calc.amount(gross=20000, eligible=True, included=True) == 150.0
    assert calc.amount(gross=12345.678, eligible=True, included=True) == 92.59
    assert calc.amount(gross=20000, eligible=True, included=False) == 0.0
    assert calc.amount(gross=20000, eligible=False, included=True) == 0.0
    assert calc.amount(gross=0, eligible=True, included=True) == 0.0


@pytest.fixture
def esi_repos(repos):
    repos.employees.save(make_employee("E001", monthly_salary=21000, esi_applicable=True))
    repos.employees.save(make_employee("E002", monthly_salary=25000, esi_applicable=True))
    return repos


def test_register_lists_every_active_employee(container, esi_repos, fixed_now):
    esi_repos.credits.credited[MONTH] = {"E001"}

    register = {e.employee_id: e for e in container.esi_service.build_register(MONTH, now=fixed_now)}

    eligible, over_limit = register["E001"], register["E002"]
    assert eligible.eligible and eligible.esi_included
    expected_gross = container.gross_service.compute(esi_repos.employees.get("E001"), MONTH).breakdown.total_gross_earnings
    assert eligible.total_gross_earnings == pytest.approx(round(expected_gross, 2))
    assert eligible.esi_amount == EsiCalculator().amount(gross=expected_gross, eligible=True, included=True)
    assert eligible.payment_status == PaymentStatus.PENDING
    assert eligible.salary_credited
    assert not over_limit.eligible
    assert over_limit.esi_amount == 0.0
    assert not over_limit.salary_credited


def test_overrides_survive_recompute(container, esi_repos, hr, fixed_now):
    container.esi_service.update_entry(actor=hr, month=MONTH, employee_id="E001", esi_included=False, now=fixed_now)

    register = container.esi_service.recompute_month(actor=hr, month=MONTH, now=fixed_now)
    line = next(e for e in register if e.employee_id == "E001")

    assert not line.esi_included
    assert line.esi_amount == 0.0
    assert esi_repos.esi.get(MONTH, "E001") == line


def test_paid_requires_esi_to_be_included(container, esi_repos, hr, fixed_now):
    with pytest.raises(ValidationError):
        container.esi_service.update_entry(
            actor=hr,
            month=MONTH,
            employee_id="E001",
            esi_included=False,
            payment_status="Paid",
            now=fixed_now,
        )

    paid = container.esi_service.update_entry(
        actor=hr,
        month=MONTH,
        employee_id="E001",
        payment_status=PaymentStatus.PAID,
        now=fixed_now,
    )
    assert paid.payment_status == PaymentStatus.PAID

    with pytest.raises(ValidationError):
        container.esi_service.update_entry(actor=hr, month=MONTH, employee_id="E001", esi_included=False, now=fixed_now)


def test_unknown_line_is_rejected(container, esi_repos, hr, fixed_now):
    with pytest.raises(ValidationError):
        container.esi_service.update_entry(actor=hr, month=MONTH, employee_id="NOPE", esi_included=True, now=fixed_now)


def test_employees_cannot_touch_the_register(container, esi_repos, employee_actor, fixed_now):
    with pytest.raises(AuthorizationError):
        container.esi_service.recompute_month(actor=employee_actor, month=MONTH, now=fixed_now)
    with pytest.raises(AuthorizationError):
        container.esi_service.update_entry(
            actor=employee_actor,
            month=MONTH,
            employee_id="E001",
            esi_included=True,
            now=fixed_now,
        )
