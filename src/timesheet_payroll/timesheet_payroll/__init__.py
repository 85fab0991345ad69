"""Timesheet & Payroll core package.

This package is organized by feature modules (attendance, timesheet, payroll,
esi, approvals, ...) with a thin Flask controller layer and service/repository
layers underneath. Calculators are pure and never touch the database.
"""
