"""Unit tests for JWTService."""

from datetime import datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from discuss.config import AuthSettings
from discuss.domain.service import JWTService
from discuss.domain.service.jwt_service import JWTError


class TestJWTService:
    """Tests for token verification and optional authentication."""

    def test_token_round_trip(self):
        service = JWTService(AuthSettings(jwt_secret="test-secret"))
        user_id = str(uuid4())

        token = service.issue_token(user_id)

        assert service.verify_token(token).user_id == user_id
        assert service.get_user_id_from_token(token) == user_id

    def test_token_signed_with_other_secret_is_rejected(self):
        issuer = JWTService(AuthSettings(jwt_secret="someone-else"))
        service = JWTService(AuthSettings(jwt_secret="test-secret"))
        token = issuer.issue_token(str(uuid4()))

        with pytest.raises(JWTError):
            service.verify_token(token)
        assert service.get_user_id_from_token(token) is None

    def test_expired_token_is_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret")
        service = JWTService(settings)
        token = jwt.encode(
            {"user_id": str(uuid4()), "exp": datetime.now() - timedelta(days=2)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_malformed_token_is_anonymous(self, token):
        service = JWTService(AuthSettings(jwt_secret="test-secret"))

        assert service.get_user_id_from_token(token) is None

    def test_token_without_user_is_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret")
        service = JWTService(settings)
        token = jwt.encode(
            {"exp": datetime.now() + timedelta(days=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            service.verify_token(token)
