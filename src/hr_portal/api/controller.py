from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def _submitted_fields():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else request.form


def _payload(errors) -> dict:
    return {"ok": not errors, "field_errors": {k: v.to_dict() for k, v in errors.items()}}


def register(app: Flask, container: Container) -> None:
    """Pre-submit checks the forms call before submitting.

    Advisory only: the create/edit routes validate again with the same rules.
    """

    @app.route("/api/validate/employee", methods=["POST"], endpoint="api_validate_employee")
    def api_validate_employee():
        fields = _submitted_fields()
        return jsonify(_payload(container.employee_service.check(fields)))

    @app.route("/api/validate/timesheet", methods=["POST"], endpoint="api_validate_timesheet")
    def api_validate_timesheet():
        fields = _submitted_fields()
        for_update = request.args.get("mode") == "update"
        return jsonify(_payload(container.timesheet_service.check(fields, for_update=for_update)))
