from __future__ import annotations

import io

from hr_portal.core.exceptions import PersistenceError


def _employee_form(**overrides):
    form = {
        "full_name": "Maria Lopez",
        "email": "maria@example.com",
        "phone_number": "+15551234567",
        "date_of_birth": "1995-07-04",
        "job_title": "Analyst",
        "department": "Finance",
        "salary": "52000",
        "start_date": "2025-03-01",
        "end_date": "",
    }
    form.update(overrides)
    return form


def test_index_redirects_to_employees(client):
    res = client.get("/")
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/employees")


def test_employee_list_and_filters(client):
    html = client.get("/employees").get_data(as_text=True)
    assert "John Doe" in html and "Jane Smith" in html and "Alice Johnson" in html

    html = client.get("/employees?name=smith").get_data(as_text=True)
    assert "Jane Smith" in html
    assert "John Doe" not in html

    html = client.get("/employees?id=3").get_data(as_text=True)
    assert "Alice Johnson" in html
    assert "Jane Smith" not in html


def test_employee_detail_shows_documents(client):
    res = client.get("/employees/1")
    assert res.status_code == 200
    assert "john_doe.jpg" in res.get_data(as_text=True)


def test_employee_detail_bad_and_unknown_ids(client):
    res = client.get("/employees/abc")
    assert res.status_code == 400
    assert "Invalid Employee ID" in res.get_data(as_text=True)

    res = client.get("/employees/999")
    assert res.status_code == 404
    html = res.get_data(as_text=True)
    assert "Employee Not Found" in html
    assert "Back to Employees" in html


def test_create_employee_form_limits_birth_date(client):
    html = client.get("/employees/new").get_data(as_text=True)
    assert 'max="2007-02-15"' in html


def test_create_underage_employee_rerenders_with_error(client, employees_repo):
    res = client.post("/employees/new", data=_employee_form(date_of_birth="2007-02-16"))

    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert "Employee must be at least 18 years old" in html
    assert 'value="Maria Lopez"' in html
    assert len(employees_repo.list_all()) == 3


def test_create_employee_with_upload(client, employees_repo):
    data = _employee_form()
    data["photo"] = (io.BytesIO(b"\xff\xd8"), "my photo.jpg")
    res = client.post("/employees/new", data=data, content_type="multipart/form-data")

    assert res.status_code == 302
    assert res.headers["Location"].endswith("/employees")
    assert employees_repo.get_by_id(4).photo_path == "my_photo.jpg"


def test_update_employee(client, employees_repo):
    res = client.post("/employees/2", data=_employee_form(full_name="Jane Q. Smith"))

    assert res.status_code == 302
    assert res.headers["Location"].endswith("/employees/2")
    assert employees_repo.get_by_id(2).full_name == "Jane Q. Smith"


def test_store_failure_is_flashed_verbatim(client, employees_repo, monkeypatch):
    def fail(**kwargs):
        raise PersistenceError("Duplicate entry 'maria@example.com' for key 'email'")

    monkeypatch.setattr(employees_repo, "create", fail)
    res = client.post("/employees/new", data=_employee_form())

    assert res.status_code == 200
    assert "Duplicate entry &#39;maria@example.com&#39; for key &#39;email&#39;" in res.get_data(as_text=True)


def test_unexpected_failure_shows_generic_message(client, employees_repo, monkeypatch):
    def fail(**kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(employees_repo, "update", fail)
    res = client.post("/employees/1", data=_employee_form())

    html = res.get_data(as_text=True)
    assert "Failed to update employee" in html
    assert "boom" not in html


def test_timesheet_table_view(client):
    html = client.get("/timesheets").get_data(as_text=True)
    assert "#1" in html
    assert "John Doe (ID: 1)" in html

    html = client.get("/timesheets?employee_id=2").get_data(as_text=True)
    assert "Jane Smith (ID: 2)" in html
    assert "John Doe" not in html


def test_timesheet_calendar_view(client):
    html = client.get("/timesheets?view=calendar&month=2025-02").get_data(as_text=True)

    assert "February 2025" in html
    assert "John Doe (08:00)" in html
    assert "Jane Smith (12:00)" in html
    assert "month=2025-01" in html
    assert "month=2025-03" in html


def test_timesheet_calendar_other_month_is_empty(client):
    html = client.get("/timesheets?view=calendar&month=2025-03").get_data(as_text=True)
    assert "March 2025" in html
    assert "John Doe (08:00)" not in html


def test_create_timesheet_without_summary(client, timesheets_repo):
    res = client.post(
        "/timesheets/new",
        data={"employee_id": "1", "start_time": "2025-02-14T09:00", "end_time": "2025-02-14T10:00", "summary": ""},
    )

    assert res.status_code == 302
    assert timesheets_repo.get_by_id(4).summary is None


def test_create_timesheet_with_equal_times(client):
    res = client.post(
        "/timesheets/new",
        data={"employee_id": "1", "start_time": "2025-02-14T09:00", "end_time": "2025-02-14T09:00"},
    )

    assert res.status_code == 200
    assert "End time must be after start time" in res.get_data(as_text=True)


def test_update_timesheet_requires_summary(client, timesheets_repo):
    res = client.post(
        "/timesheets/1",
        data={"employee_id": "1", "start_time": "2025-02-10T08:00", "end_time": "2025-02-10T18:00", "summary": ""},
    )

    assert res.status_code == 200
    assert "Summary is required" in res.get_data(as_text=True)
    assert timesheets_repo.get_by_id(1).end_time.hour == 17


def test_timesheet_detail_errors(client):
    res = client.get("/timesheets/abc")
    assert res.status_code == 400
    assert "Back to Timesheets" in res.get_data(as_text=True)

    assert client.get("/timesheets/123").status_code == 404


def test_validate_employee_api(client):
    res = client.post("/api/validate/employee", json=_employee_form(date_of_birth="2010-05-05", email=""))
    body = res.get_json()

    assert body["ok"] is False
    assert body["field_errors"]["date_of_birth"]["reason"] == "UNDERAGE"
    assert body["field_errors"]["email"]["reason"] == "MISSING_REQUIRED_FIELD"

    assert client.post("/api/validate/employee", json=_employee_form()).get_json() == {"ok": True, "field_errors": {}}


def test_validate_timesheet_api_modes(client):
    fields = {"employee_id": "1", "start_time": "2025-02-14T09:00", "end_time": "2025-02-14T10:00"}

    assert client.post("/api/validate/timesheet", json=fields).get_json()["ok"] is True

    body = client.post("/api/validate/timesheet?mode=update", data=fields).get_json()
    assert body["ok"] is False
    assert list(body["field_errors"]) == ["summary"]


def test_non_ascii_digit_ids_are_bad_requests(client):
    assert client.get("/employees/%C2%B2").status_code == 400
    assert client.get("/timesheets/%C2%B2").status_code == 400


def test_validate_timesheet_api_with_non_ascii_employee_id(client):
    fields = {"employee_id": "²", "start_time": "2025-02-14T09:00", "end_time": "2025-02-14T10:00"}
    res = client.post("/api/validate/timesheet", json=fields)

    assert res.status_code == 200
    assert res.get_json()["field_errors"]["employee_id"]["reason"] == "MISSING_REQUIRED_FIELD"


def test_calendar_search_keeps_the_month(client):
    html = client.get("/timesheets?view=calendar&month=2025-02").get_data(as_text=True)
    assert '<input type="hidden" name="month" value="2025-02">' in html

    html = client.get("/timesheets").get_data(as_text=True)
    assert 'name="month"' not in html
