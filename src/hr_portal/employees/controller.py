from __future__ import annotations

from typing import Dict

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import format_date
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container
from .model import Employee


def employee_form_values(employee: Employee) -> Dict[str, str]:
    """Stored employee -> the string values the edit form is prefilled with."""

    return {
        "full_name": employee.full_name or "",
        "email": employee.email or "",
        "phone_number": employee.phone_number or "",
        "date_of_birth": format_date(employee.date_of_birth),
        "job_title": employee.job_title or "",
        "department": employee.department or "",
        "salary": "" if employee.salary is None else f"{employee.salary:g}",
        "start_date": format_date(employee.start_date),
        "end_date": format_date(employee.end_date),
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _system_error(default: str, e: Exception) -> str:
        if bool(app.config.get("DEBUG", False)):
            return f"{default}: {e}"
        return default

    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        filters = {
            "employee_id": request.args.get("id", ""),
            "name": request.args.get("name", ""),
            "email": request.args.get("email", ""),
        }
        rows = service.list_employees(**filters)
        return render_template("employees/index.html", employees=rows, filters=filters, active_page="employees")

    @app.route("/employees/new", methods=["GET", "POST"], endpoint="new_employee")
    def new_employee():
        errors = {}
        if request.method == "POST":
            try:
                service.create_employee(request.form, request.files)
                flash("Employee created.", "success")
                return redirect(url_for("employees"))
            except ValidationError as e:
                errors = e.field_errors
            except PersistenceError as e:
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("Failed to create employee")
                flash(_system_error("Failed to create employee. Please try again.", e), "danger")

        return render_template(
            "employees/new.html",
            form=request.form,
            errors=errors,
            max_birth_date=format_date(service.max_birth_date()),
            active_page="new_employee",
        )

    @app.route("/employees/<employee_id>", methods=["GET", "POST"], endpoint="employee_detail")
    def employee_detail(employee_id: str):
        employee = service.get_employee(employee_id)
        form = employee_form_values(employee)
        errors = {}

        if request.method == "POST":
            form = request.form
            try:
                service.update_employee(employee.id, request.form)
                flash("Employee updated.", "success")
                return redirect(url_for("employee_detail", employee_id=employee.id))
            except ValidationError as e:
                errors = e.field_errors
            except PersistenceError as e:
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("Failed to update employee %s", employee.id)
                flash(_system_error("Failed to update employee", e), "danger")

        return render_template(
            "employees/detail.html",
            employee=employee,
            form=form,
            errors=errors,
            max_birth_date=format_date(service.max_birth_date()),
            active_page="employees",
        )
