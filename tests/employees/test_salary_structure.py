from src.timesheet_payroll.timesheet_payroll.employees.model import Employee, SalaryStructure
from src.timesheet_payroll.timesheet_payroll.employees.salary import derive_structure, monthly_salary_of


def test_basic_and_hra_split_with_other_as_remainder():
    s = derive_structure(20000, conveyance=1600, special_allowance=1000)
    assert (s.basic, s.hra, s.conveyance, s.special_allowance, s.other_allowance) == (10000, 5000, 1600, 1000, 2400)
    assert s.gross_monthly == 20000


def test_special_allowance_is_capped_by_what_remains():
    s = derive_structure(20000, conveyance=3000, special_allowance=4000, additional_special_allowance=500)
    assert s.special_allowance == 2000
    assert s.other_allowance == 0
    assert s.additional_special_allowance == 500
    assert s.gross_monthly == 20000


def test_half_rupees_round_up():
    s = derive_structure(15001)
    assert s.basic == 7501
    assert s.hra == 3750
    assert s.other_allowance == 3750
    assert s.gross_monthly == 15001


def test_monthly_salary_prefers_gross_then_components():
    assert monthly_salary_of(Employee(employee_id="A", name="A", salary=derive_structure(18000))) == 18000
    components = SalaryStructure(monthly_salary=0, basic=5000, hra=2500, other_allowance=2500)
    assert monthly_salary_of(Employee(employee_id="B", name="B", salary=components)) == 10000
    assert monthly_salary_of(Employee(employee_id="C", name="C", salary=SalaryStructure(monthly_salary=9000))) == 9000
