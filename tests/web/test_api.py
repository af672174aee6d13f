from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus

HQ = {"latitude": 24.7136, "longitude": 46.6753, "accuracy": 12}


def test_login_rejects_bad_password(client):
    resp = client.post("/api/auth/login", json={"email": "employee@hr.local", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid email or password"}


def test_login_and_profile(client, login):
    resp = login("Employee@HR.local", "employee123")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["role"] == "user"

    me = client.get("/api/auth/me").get_json()["data"]
    assert me["branch"]["name"] == "Head Office"
    assert [s["name"] for s in me["shifts"]] == ["Morning", "Night"]


def test_routes_require_login(client):
    resp = client.get("/api/attendance/state")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_check_in_over_http(client, login, repos):
    login("employee@hr.local", "employee123")

    resp = client.post("/api/attendance/check-in", json=HQ)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["status"] == AttendanceStatus.ON_TIME.value
    assert body["data"]["date"] == "2025-03-03"
    assert len(repos.attendance.records) == 1

    state = client.get("/api/attendance/state").get_json()
    assert state["data"]["can_check_in"] is False

    presence = client.get("/api/attendance/presence?shift_id=1").get_json()
    assert presence["data"]["present"] is True


def test_check_in_outside_radius_reports_distance(client, login):
    login("employee@hr.local", "employee123")

    resp = client.post("/api/attendance/check-in", json={"latitude": 24.7236, "longitude": 46.6753})

    assert resp.status_code == 422
    body = resp.get_json()
    assert body["message"] == "You are outside the allowed work location"
    assert body["distance"] > 1000


def test_check_in_requires_location(client, login):
    login("employee@hr.local", "employee123")

    resp = client.post("/api/attendance/check-in", json={})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Location is required"


def test_admin_routes_are_guarded(client, login):
    login("employee@hr.local", "employee123")

    assert client.get("/api/dashboard/stats").status_code == 403
    assert client.post("/api/branches", json={"name": "X"}).status_code == 403


def test_admin_manages_branches_and_reports(client, login):
    login("admin@hr.local", "admin123")

    bad = client.post("/api/branches", json={"name": "Dammam", "latitude": 26.4, "longitude": 50.1, "radius": 0})
    assert bad.status_code == 400
    assert bad.get_json()["message"] == "Branch radius must be greater than zero"

    created = client.post("/api/branches", json={"name": "Dammam", "latitude": 26.4, "longitude": 50.1, "radius": 100})
    assert created.status_code == 201

    stats = client.get("/api/dashboard/stats").get_json()["data"]
    assert stats["total_employees"] == 1

    report = client.get("/api/reports/attendance?year=2025&month=3").get_json()["data"]
    assert report["total_count"] == 2

    salary = client.get("/api/salaries/2?year=2025&month=3").get_json()["data"]
    assert salary["working_days"] == 22


def test_leave_request_flow(client, login):
    login("employee@hr.local", "employee123")
    created = client.post(
        "/api/leave-requests", json={"start_date": "2025-04-06", "end_date": "2025-04-07", "reason": "Trip"}
    )
    assert created.status_code == 201
    request_id = created.get_json()["data"]["id"]

    client.post("/api/auth/logout")
    login("admin@hr.local", "admin123")
    assert client.post(f"/api/leave-requests/{request_id}/approve", json={}).status_code == 200
    assert client.post(f"/api/leave-requests/{request_id}/approve", json={}).status_code == 409


def test_unknown_route_is_json(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_create_shift_with_bad_numbers_is_a_client_error(client, login):
    login("admin@hr.local", "admin123")

    missing_employee = client.post("/api/shifts", json={"start_time": "08:00", "end_time": "16:00"})
    assert missing_employee.status_code == 400
    assert missing_employee.get_json()["message"] == "Employee id must be an integer"

    bad_break = client.post(
        "/api/shifts",
        json={"employee_id": 2, "start_time": "08:00", "end_time": "16:00", "break_minutes": "abc"},
    )
    assert bad_break.status_code == 400
    assert bad_break.get_json()["message"] == "Break minutes must be an integer"


def test_branch_radius_must_be_finite(client, login):
    login("admin@hr.local", "admin123")

    for raw in ('{"radius": Infinity}', '{"radius": NaN}'):
        resp = client.put("/api/branches/1", data=raw, content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Branch radius must be greater than zero"

    assert client.get("/api/branches/1").get_json()["data"]["radius"] == 150
