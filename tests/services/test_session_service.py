"""
Tests for the SessionService: login and token verification.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from demo_bank.config import Settings
from demo_bank.exceptions import (
    InvalidCredential,
    InvalidCredentials,
    MissingCredential,
)
from demo_bank.services.session_service import (
    SessionService,
    hash_password,
    verify_password,
)


def make_settings(**overrides) -> Settings:
    settings = Settings()
    settings.JWT_SECRET = "test-secret-with-enough-bytes-for-hs256"
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


class TestPasswords:

    def test_hash_then_verify(self):
        hashed = hash_password("s3cret-pass", rounds=4)
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("wrong", hashed)

    def test_overlong_password_never_matches(self):
        hashed = hash_password("short", rounds=4)
        assert not verify_password("x" * 100, hashed)

    def test_non_bcrypt_hash_never_matches(self):
        assert not verify_password("password123", "plaintext")


class TestIssue:

    def test_valid_login_returns_token_for_user(self, db_session):
        service = SessionService(db_session, settings=make_settings())

        session = service.issue("demo@bank.com", "password123")

        assert session.user.id == 1
        assert session.user.name == "Demo User"
        assert service.verify(session.token) == 1

    def test_session_expires_after_configured_window(self, db_session):
        service = SessionService(db_session, settings=make_settings())

        before = datetime.now(timezone.utc)
        session = service.issue("demo@bank.com", "password123")

        window = session.expires_at - before
        assert timedelta(hours=23, minutes=59) < window <= timedelta(hours=24, seconds=5)

    def test_wrong_password_and_unknown_email_fail_identically(self, db_session):
        service = SessionService(db_session, settings=make_settings())

        with pytest.raises(InvalidCredentials) as wrong_password:
            service.issue("demo@bank.com", "nope")
        with pytest.raises(InvalidCredentials) as unknown_email:
            service.issue("nobody@bank.com", "password123")

        assert str(wrong_password.value) == str(unknown_email.value)
        assert str(wrong_password.value) == "Invalid credentials"

    def test_email_match_is_case_sensitive(self, db_session):
        service = SessionService(db_session, settings=make_settings())
        with pytest.raises(InvalidCredentials):
            service.issue("Demo@Bank.com", "password123")

    def test_empty_secret_rejected(self, db_session):
        with pytest.raises(ValueError, match="secret"):
            SessionService(db_session, settings=make_settings(JWT_SECRET=""))


class TestVerify:

    def test_missing_credential(self, db_session):
        service = SessionService(db_session, settings=make_settings())
        with pytest.raises(MissingCredential):
            service.verify(None)
        with pytest.raises(MissingCredential):
            service.verify("")

    def test_garbage_token(self, db_session):
        service = SessionService(db_session, settings=make_settings())
        with pytest.raises(InvalidCredential):
            service.verify("not-a-jwt")

    def test_expired_token(self, db_session):
        settings = make_settings()
        service = SessionService(db_session, settings=settings)
        token = jwt.encode(
            {"sub": "1", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            settings.JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidCredential):
            service.verify(token)

    def test_token_signed_with_other_secret(self, db_session):
        service = SessionService(db_session, settings=make_settings())
        token = jwt.encode(
            {"sub": "1", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "a-completely-different-signing-secret",
            algorithm="HS256",
        )
        with pytest.raises(InvalidCredential):
            service.verify(token)

    def test_token_without_expiry(self, db_session):
        settings = make_settings()
        service = SessionService(db_session, settings=settings)
        token = jwt.encode({"sub": "1"}, settings.JWT_SECRET, algorithm="HS256")
        with pytest.raises(InvalidCredential):
            service.verify(token)

    def test_non_numeric_subject(self, db_session):
        settings = make_settings()
        service = SessionService(db_session, settings=settings)
        token = jwt.encode(
            {"sub": "abc", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            settings.JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidCredential):
            service.verify(token)
