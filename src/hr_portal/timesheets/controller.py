from __future__ import annotations

from typing import Dict

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import format_datetime_local, parse_month, today_local
from ..core.enums import TimesheetView
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container
from .model import Timesheet


def timesheet_form_values(timesheet: Timesheet) -> Dict[str, str]:
    return {
        "employee_id": str(timesheet.employee_id),
        "start_time": format_datetime_local(timesheet.start_time),
        "end_time": format_datetime_local(timesheet.end_time),
        "summary": timesheet.summary or "",
    }


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service

    def _system_error(default: str, e: Exception) -> str:
        if bool(app.config.get("DEBUG", False)):
            return f"{default}: {e}"
        return default

    def _view_mode() -> TimesheetView:
        try:
            return TimesheetView(request.args.get("view", TimesheetView.TABLE.value))
        except ValueError:
            return TimesheetView.TABLE

    def _reference_month():
        value = request.args.get("month") or ""
        try:
            return parse_month(value)
        except ValueError:
            return today_local()

    @app.route("/timesheets", methods=["GET"], endpoint="timesheets")
    def timesheets():
        filters = {
            "timesheet_id": request.args.get("timesheet_id", ""),
            "employee_id": request.args.get("employee_id", ""),
        }
        rows = service.list_timesheets(**filters)
        view = _view_mode()

        grid = None
        if view == TimesheetView.CALENDAR:
            grid = service.calendar(rows, reference=_reference_month())

        return render_template(
            "timesheets/index.html",
            timesheets=rows,
            grid=grid,
            view=view.value,
            filters=filters,
            active_page="timesheets",
        )

    @app.route("/timesheets/new", methods=["GET", "POST"], endpoint="new_timesheet")
    def new_timesheet():
        errors = {}
        if request.method == "POST":
            try:
                service.create_timesheet(request.form)
                flash("Timesheet created.", "success")
                return redirect(url_for("timesheets"))
            except ValidationError as e:
                errors = e.field_errors
            except PersistenceError as e:
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("Failed to create timesheet")
                flash(_system_error("Failed to create timesheet", e), "danger")

        return render_template(
            "timesheets/new.html",
            form=request.form,
            errors=errors,
            employees=service.employee_choices(),
            summary_required=service.create_rules.is_required("summary"),
            active_page="new_timesheet",
        )

    @app.route("/timesheets/<timesheet_id>", methods=["GET", "POST"], endpoint="timesheet_detail")
    def timesheet_detail(timesheet_id: str):
        timesheet = service.get_timesheet(timesheet_id)
        form = timesheet_form_values(timesheet)
        errors = {}

        if request.method == "POST":
            form = request.form
            try:
                service.update_timesheet(timesheet.id, request.form)
                flash("Timesheet updated.", "success")
                return redirect(url_for("timesheet_detail", timesheet_id=timesheet.id))
            except ValidationError as e:
                errors = e.field_errors
            except PersistenceError as e:
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("Failed to update timesheet %s", timesheet.id)
                flash(_system_error("Failed to update timesheet", e), "danger")

        return render_template(
            "timesheets/detail.html",
            timesheet=timesheet,
            form=form,
            errors=errors,
            employees=service.employee_choices(),
            summary_required=service.update_rules.is_required("summary"),
            active_page="timesheets",
        )
