"""
conftest.py — Shared Test Fixtures for the signup service

Provides hand-written collaborator fakes, a controller "system under
test" factory, and a FastAPI TestClient whose controller and MongoDB
handle are replaced so no database is needed.

Business Rules:
- Fakes are plain classes implementing the protocols, built per test
- The TestClient never talks to a real MongoDB
- Integration tests that need MongoDB are skipped unless MONGO_URL is set

Called by: all test files via pytest autodiscovery
Depends on: app.protocols, app.controllers, app.main
"""

import os
os.environ.setdefault("MONGO_TIMEOUT_MS", "200")  # Must be set before importing app modules

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.controllers import SignupController
from app.models import Account, AddAccountInput
from app.protocols import AddAccount, EmailValidator


# ── Fakes ────────────────────────────────────────────────────────────


class EmailValidatorStub(EmailValidator):
    """Answers ``result`` (or raises ``error``) and records every call."""

    def __init__(self, result: bool = True, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[str] = []

    def is_valid(self, email: str) -> bool:
        self.calls.append(email)
        if self.error:
            raise self.error
        return self.result


class AddAccountStub(AddAccount):
    """Returns a fixed account (or raises ``error``) and records every call."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[AddAccountInput] = []

    async def execute(self, data: AddAccountInput) -> Account:
        self.calls.append(data)
        if self.error:
            raise self.error
        return make_fake_account()


def make_fake_account() -> Account:
    return Account(
        id="valid_id",
        name="valid",
        email="valid@gmail.com",
        password="valid_password",
    )


def make_fake_body() -> dict:
    return {
        "name": "any_name",
        "email": "invalid_email@gmail.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }


@dataclass
class Sut:
    sut: SignupController
    email_validator_stub: EmailValidatorStub
    add_account_stub: AddAccountStub


def make_sut() -> Sut:
    email_validator = EmailValidatorStub()
    add_account = AddAccountStub()
    return Sut(SignupController(email_validator, add_account), email_validator, add_account)


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture()
def sut() -> Sut:
    """A SignupController whose fakes can be reconfigured per test."""
    return make_sut()


@pytest.fixture()
def fake_body() -> dict:
    """A complete, consistent signup body."""
    return make_fake_body()


@pytest.fixture()
def fake_account() -> Account:
    return make_fake_account()


@pytest.fixture()
def fake_mongo() -> MagicMock:
    """A MongoConnection stand-in whose ping succeeds."""
    mongo = MagicMock()
    mongo.ping = AsyncMock(return_value=True)
    return mongo


@pytest.fixture()
def client(fake_mongo: MagicMock, sut: Sut) -> TestClient:
    """FastAPI TestClient wired to fake collaborators.

    The lifespan still runs (it only creates a lazy Mongo client); the
    state it sets is then replaced with fakes. The controller is the one
    from the ``sut`` fixture, so tests can reconfigure its stubs.
    """
    from app.main import app

    with TestClient(app) as c:
        app.state.mongo = fake_mongo
        app.state.signup_controller = sut.sut
        yield c
