from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt

from farmtrack.application.errors import AuthError
from farmtrack.infrastructure.auth.jwt_service import JWTService


def test_issued_token_authenticates_to_account() -> None:
    service = JWTService(secret_key="s3cret", audience="authenticated")
    account_id = uuid4()

    ctx = service.authenticate(service.issue(account_id, email="farmer@example.com"))

    assert ctx.account_id == account_id
    assert ctx.email == "farmer@example.com"


def test_expired_token_is_rejected() -> None:
    service = JWTService(secret_key="s3cret", lifetime=timedelta(minutes=-5))

    with pytest.raises(AuthError, match="expired"):
        service.authenticate(service.issue(uuid4()))


def test_token_signed_with_other_key_is_rejected() -> None:
    token = JWTService(secret_key="other").issue(uuid4())

    with pytest.raises(AuthError):
        JWTService(secret_key="s3cret").authenticate(token)


def test_subject_must_be_an_account_id() -> None:
    token = jwt.encode({"sub": "not-a-uuid"}, "s3cret", algorithm="HS256")

    with pytest.raises(AuthError, match="account id"):
        JWTService(secret_key="s3cret").authenticate(token)
