"""HR Attendance service package.

Feature modules (employees, shifts, branches, attendance, payroll, ...) each
carry a domain model, a repository interface with its MySQL implementation,
a service layer and a thin Flask controller.
"""
