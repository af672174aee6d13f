import pytest

from src.hr_attendance.hr_attendance.attendance import service as attendance_service_module
from src.hr_attendance.hr_attendance.main import create_app


@pytest.fixture
def app(container, monkeypatch, fixed_now):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(attendance_service_module, "now_local", lambda tz_name=None: fixed_now)
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(email: str, password: str):
        return client.post("/api/auth/login", json={"email": email, "password": password})

    return _login
