"""
Shared fixtures: in-memory SQLite database, fake mailer, authenticated clients.

Environment variables must be set before the application package is imported.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["SEED_SAMPLE_DATA"] = "true"

import pytest
from fastapi.testclient import TestClient

from gestion_entretiens.database import Base, SessionLocal, engine, import_models
from gestion_entretiens.main import app
from gestion_entretiens.services.email_service import get_mailer

import_models()

MARIE = ("marie.dubois@entreprise.com", "password123")
PIERRE = ("pierre.martin@entreprise.com", "password123")


class FakeMailer:
    """Records outgoing mail instead of talking to SMTP."""

    def __init__(self):
        self.codes = {}
        self.welcomed = []
        self.fail_codes = False
        self.fail_welcome = False

    def send_verification_code(self, email, code):
        if self.fail_codes:
            return False
        self.codes[email] = code
        return True

    def send_welcome_email(self, email, nom):
        if self.fail_welcome:
            return False
        self.welcomed.append((email, nom))
        return True


@pytest.fixture
def fake_mailer():
    return FakeMailer()


@pytest.fixture
def db_session():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(fake_mailer):
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides[get_mailer] = lambda: fake_mailer
    # entering the context runs the lifespan: tables + sample data
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _login(client, email, password):
    res = client.post("/api/auth/login", json={"email": email, "mot_de_passe": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def marie(client):
    return _login(client, *MARIE)


@pytest.fixture
def pierre(client):
    return _login(client, *PIERRE)


@pytest.fixture
def login_as(client):
    def _as(email, password):
        return _login(client, email, password)
    return _as
