"""Authentication: password hashing and JWT access tokens."""
from datetime import timedelta
from typing import Optional
import hashlib
import hmac
import logging
import time
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from .config import settings
from .database import get_db
from .models import User

# Password hashing; cost factor comes from SALT_ROUNDS.
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.SALT_ROUNDS,
)
logger = logging.getLogger(__name__)

# Bearer token scheme (missing header is reported as 401 below, not 403)
security = HTTPBearer(auto_error=False)


def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _peppered(password: str) -> str:
    """HMAC-SHA256 of the password keyed by BCRYPT_PASSWORD.

    bcrypt only reads the first 72 bytes of its input; the 64-char hex
    digest fits, so every password byte and the pepper reach the hash.
    """
    return hmac.new(
        settings.BCRYPT_PASSWORD.encode("utf-8"),
        password.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def hash_password(password: str) -> str:
    """Hash password (peppered with BCRYPT_PASSWORD)."""
    return pwd_context.hash(_peppered(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    try:
        return pwd_context.verify(_peppered(plain_password), hashed_password)
    except (ValueError, TypeError):
        # Invalid/corrupted hash should not crash login flow.
        logger.exception("Password verification failed due to invalid hash format")
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    now = int(time.time())
    if expires_delta is not None:
        exp = now + int(expires_delta.total_seconds())
    else:
        exp = now + int(settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES) * 60
    to_encode.update({"exp": exp, "iat": now, "type": "access"})
    return jwt.encode(to_encode, settings.TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode JWT token.

    Expiry is checked here rather than by jose so that the configured
    leeway applies to both ``exp`` and ``iat``.
    """
    try:
        payload = jwt.decode(
            token,
            settings.TOKEN_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_exp": False, "verify_iat": False},
        )
    except JWTError:
        raise _credentials_exception()

    now = int(time.time())
    leeway = int(settings.JWT_LEEWAY_SECONDS)
    try:
        exp = int(payload["exp"])
    except (KeyError, TypeError, ValueError):
        raise _credentials_exception()
    if now > exp + leeway:
        raise _credentials_exception("Token expired")

    iat = payload.get("iat")
    if iat is not None:
        try:
            iat_int = int(iat)
        except (TypeError, ValueError):
            raise _credentials_exception()
        # Reject tokens issued far in the future (clock skew / malicious tokens).
        if iat_int > now + leeway:
            raise _credentials_exception()
    return payload


def _parse_token_subject(payload: dict) -> UUID:
    """Parse and validate JWT subject as UUID."""
    sub = payload.get("sub")
    if not sub:
        raise _credentials_exception()
    try:
        return UUID(str(sub))
    except ValueError:
        raise _credentials_exception()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user."""
    if credentials is None:
        raise _credentials_exception("Not authenticated")

    payload = decode_token(credentials.credentials)
    if payload.get("type") != "access":
        raise _credentials_exception("Invalid token type")

    user_id = _parse_token_subject(payload)
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise _credentials_exception("User not found")
    return user
