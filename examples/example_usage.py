"""Example: the service layer without Flask.

Builds the container from the active settings and prints the gross earnings
of every active employee for a month.
"""

import importlib
import sys

from config import get_settings_module

from src.timesheet_payroll.timesheet_payroll.container import build_container


def main(month: str = "2024-05"):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)
    for employee in container.employee_service.list_active():
        g = container.gross_service.compute(employee, month)
        print(
            f"{employee.employee_id:<8} {employee.name:<24} "
            f"present={g.tally.present_days:<3} half={g.tally.half_days:<3} "
            f"gross={g.breakdown.total_gross_earnings:.2f}"
        )


if __name__ == "__main__":
    main(*sys.argv[1:2])
