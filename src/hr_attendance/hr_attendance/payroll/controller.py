from __future__ import annotations

from flask import Flask, request

from ..common.guards import admin_required, current_role, current_user_id, json_body, login_required
from ..common.responses import ok
from ..core.constants import DEFAULT_PAGE_SIZE
from ..container import Container


def register(app: Flask, container: Container) -> None:
    reports = container.payroll_report_service
    salaries = container.salary_service

    def _period() -> dict:
        today = container.attendance_service.now().date()
        return {
            "year": request.args.get("year", today.year),
            "month": request.args.get("month", today.month),
        }

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_report")
    @admin_required
    def attendance_report():
        data = reports.attendance_report(
            current_role=current_role(),
            page_number=request.args.get("page_number", 1),
            page_size=request.args.get("page_size", DEFAULT_PAGE_SIZE),
            **_period(),
        )
        return ok(data)

    @app.route("/api/reports/absence", methods=["GET"], endpoint="absence_report")
    @admin_required
    def absence_report():
        return ok(reports.absence_report(current_role=current_role(), **_period()))

    @app.route("/api/reports/vacations", methods=["GET"], endpoint="vacation_report")
    @admin_required
    def vacation_report():
        return ok(reports.vacation_report(current_role=current_role(), **_period()))

    @app.route("/api/reports/employee/<int:employee_id>", methods=["GET"], endpoint="employee_report")
    @login_required
    def employee_report(employee_id: int):
        args = request.args
        data = reports.employee_attendance_report(
            current_user_id=current_user_id(),
            current_role=current_role(),
            employee_id=employee_id,
            report_type=args.get("report_type", 3),
            day=args.get("day"),
            date_from=args.get("from"),
            date_to=args.get("to"),
            **_period(),
        )
        return ok(data)

    @app.route("/api/salaries", methods=["GET"], endpoint="list_salaries")
    @admin_required
    def list_salaries():
        return ok(salaries.list_salaries(current_role=current_role(), **_period()))

    @app.route("/api/salaries/<int:employee_id>", methods=["GET"], endpoint="salary_details")
    @login_required
    def salary_details(employee_id: int):
        details = salaries.details(
            current_user_id=current_user_id(),
            current_role=current_role(),
            employee_id=employee_id,
            **_period(),
        )
        return ok(details.to_dict())

    @app.route("/api/salaries/<int:employee_id>/sales-percentage", methods=["PUT"], endpoint="update_sales_percentage")
    @admin_required
    def update_sales_percentage(employee_id: int):
        body = json_body()
        today = container.attendance_service.now().date()
        pct = salaries.update_sales_percentage(
            current_role=current_role(),
            employee_id=employee_id,
            year=body.get("year", today.year),
            month=body.get("month", today.month),
            percentage=body.get("percentage"),
        )
        return ok({"employee_id": employee_id, "sales_percentage": float(pct)}, "Sales percentage updated")
