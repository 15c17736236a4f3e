"""Tests for viewer token handling."""

from datetime import timedelta

import jwt

from enquiryhub.config import settings
from enquiryhub.core.security import create_access_token, decode_token, verify_token


class TestTokens:
    """Tests for create_access_token / verify_token."""

    def test_round_trip_keeps_claims(self):
        token = create_access_token({"role": "company", "company_id": "acme"})

        payload = verify_token(token)

        assert payload["role"] == "company"
        assert payload["company_id"] == "acme"
        assert payload["type"] == "access"

    def test_expired_token_rejected(self):
        token = create_access_token({"role": "company"}, expires_delta=timedelta(seconds=-5))
        assert verify_token(token) is None

    def test_wrong_signature_rejected(self):
        token = jwt.encode({"role": "company", "type": "access"}, "other-key", algorithm=settings.ALGORITHM)
        assert decode_token(token) is None

    def test_wrong_token_type_rejected(self):
        token = jwt.encode(
            {"role": "company", "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM
        )
        assert verify_token(token) is None

    def test_garbage_rejected(self):
        assert verify_token("not-a-jwt") is None
