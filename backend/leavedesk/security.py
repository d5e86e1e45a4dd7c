from __future__ import annotations

import hashlib
import secrets
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from leavedesk.config import get_settings
from leavedesk.exceptions import AuthenticationError
from leavedesk.schemas.auth import MAX_PASSWORD_BYTES

if TYPE_CHECKING:
    import uuid

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=12)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its hash. Input past bcrypt's 72-byte limit never matches."""
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(account_id: uuid.UUID, role: str, expires_delta: timedelta | None = None) -> str:
    """Issue a signed bearer token carrying the account id and role."""
    settings = get_settings()
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    claims: dict[str, Any] = {"sub": str(account_id), "role": role, "iat": now, "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify a bearer token and return its claims."""
    try:
        claims: dict[str, Any] = jwt.decode(token, get_settings().secret_key, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise AuthenticationError("Token expired") from None
    except JWTError:
        raise AuthenticationError("Invalid token") from None
    return claims


def generate_reset_token() -> str:
    """Random token sent to the user; only its digest is stored."""
    return secrets.token_hex(32)


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
