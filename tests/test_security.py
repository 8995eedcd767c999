from datetime import timedelta

from reception.config import Settings
from reception.security.auth import (
    SettingsCredentialChecker,
    create_access_token,
    hash_password,
    verify_token,
)


def test_plain_password_checker():
    checker = SettingsCredentialChecker(Settings(admin_password="s3cret", admin_password_hash=None))

    assert checker.verify("s3cret") is True
    assert checker.verify("admin") is False


def test_hashed_password_takes_precedence():
    config = Settings(admin_password="admin", admin_password_hash=hash_password("s3cret"))
    checker = SettingsCredentialChecker(config)

    assert checker.verify("s3cret") is True
    assert checker.verify("admin") is False


def test_token_round_trip():
    payload = verify_token(create_access_token("admin", "admin"))

    assert payload is not None
    assert payload.sub == "admin"
    assert payload.role == "admin"


def test_expired_token_is_rejected():
    token = create_access_token("admin", "admin", expires_delta=timedelta(minutes=-5))
    assert verify_token(token) is None


def test_garbage_token_is_rejected():
    assert verify_token("abc.def.ghi") is None
