"""
Security utilities for Enquiry Hub.
Viewer tokens are issued by the auth provider; this module only encodes
(for tooling and tests) and verifies them.
"""
from datetime import datetime, timedelta
from typing import Optional
import uuid

import jwt

from enquiryhub.config import settings


ACCESS_TOKEN_TYPE = "access"
DEFAULT_TOKEN_LIFETIME = timedelta(minutes=30)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a viewer access token.

    Args:
        data: Payload data (role plus company_id or email)
        expires_delta: Custom expiration time

    Returns:
        Encoded JWT string
    """
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or DEFAULT_TOKEN_LIFETIME)

    to_encode.update({
        "exp": expire,
        "iat": datetime.utcnow(),
        "type": ACCESS_TOKEN_TYPE,
        "jti": str(uuid.uuid4())
    })

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


def verify_token(token: str) -> Optional[dict]:
    """Return the payload of a valid access token, None otherwise."""
    payload = decode_token(token)
    if payload and payload.get("type") == ACCESS_TOKEN_TYPE:
        return payload
    return None
