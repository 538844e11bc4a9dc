"""Unit tests for admin credential checks and session tokens."""

import base64
import hashlib
import time

import jwt
import pytest

from sitecms.application.services import AdminAuthService


def basic(email: str, password: str) -> str:
    return "Basic " + base64.b64encode(f"{email}:{password}".encode()).decode()


@pytest.fixture
def auth(admin_credentials) -> AdminAuthService:
    email, password = admin_credentials
    return AdminAuthService(email, password, session_secret="test-secret", session_ttl_seconds=60)


def test_basic_authorization(auth, admin_credentials):
    email, password = admin_credentials
    assert auth.verify_authorization(basic(email, password)) is True
    assert auth.verify_authorization(basic(email, "wrong")) is False
    assert auth.verify_authorization("Basic !!!not-base64") is False


def test_bare_password_authorization(auth, admin_credentials):
    assert auth.verify_authorization(admin_credentials[1]) is True
    assert auth.verify_authorization("nope") is False
    assert auth.verify_authorization(None) is False


def test_non_ascii_password_is_compared_safely(auth):
    assert auth.verify_authorization("contraseña") is False


def test_session_round_trip(auth):
    token = auth.issue_session()
    assert auth.verify_session(token) is True
    assert auth.is_admin(None, token) is True


def test_tampered_and_foreign_tokens_rejected(auth, admin_credentials):
    token = auth.issue_session()
    assert auth.verify_session(token[:-2] + "xx") is False

    other = AdminAuthService(*admin_credentials, session_secret="other-secret")
    assert auth.verify_session(other.issue_session()) is False


def test_expired_session_rejected(auth):
    past = int(time.time()) - 120

    key = hashlib.sha256(b"test-secret").hexdigest()
    token = jwt.encode(
        {"sub": "admin@example.com", "type": "admin_session", "iat": past, "exp": past + 60},
        key,
        algorithm="HS256",
    )
    assert auth.verify_session(token) is False


def test_unconfigured_service_denies_everything():
    auth = AdminAuthService("", "")
    assert auth.configured is False
    assert auth.check_credentials("", "") is False
    assert auth.verify_authorization("") is False
    assert auth.is_admin(basic("", ""), None) is False
