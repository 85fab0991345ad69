from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SalaryStructure:
    """Monthly salary split into components (amounts in rupees)."""

    monthly_salary: float = 0.0
    basic: float = 0.0
    hra: float = 0.0
    conveyance: float = 0.0
    special_allowance: float = 0.0
    additional_special_allowance: float = 0.0
    other_allowance: float = 0.0
    gross_monthly: float = 0.0


@dataclass(frozen=True)
class Employee:
    """Employee directory entry as far as attendance and payroll need it."""

    employee_id: str
    name: str
    department: str = ""
    employee_code: str = ""
    phone: Optional[str] = None
    status: str = "active"
    esi_applicable: bool = False
    include_esi: bool = False
    pf_applicable: bool = False
    include_pf: bool = False
    ot_rate: Optional[float] = None
    salary: SalaryStructure = field(default_factory=SalaryStructure)

    @property
    def esi_enabled(self) -> bool:
        return self.esi_applicable or self.include_esi

    @property
    def pf_enabled(self) -> bool:
        return self.pf_applicable or self.include_pf

    @property
    def is_active(self) -> bool:
        return self.status == "active"


@dataclass(frozen=True)
class EmployeeUpdate:
    """Fields submitted from the employee form; ``None`` means unchanged."""

    name: Optional[str] = None
    department: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    ot_rate: Optional[float] = None
    esi_applicable: Optional[bool] = None
    pf_applicable: Optional[bool] = None
    include_esi: Optional[bool] = None
    include_pf: Optional[bool] = None
    monthly_salary: Optional[float] = None
    conveyance: Optional[float] = None
    special_allowance: Optional[float] = None
    additional_special_allowance: Optional[float] = None

