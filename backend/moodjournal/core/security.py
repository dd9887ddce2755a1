"""
Security utilities for JWT authentication and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import base64
import hashlib
import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from moodjournal.core.config import Settings
from moodjournal.core.errors import AuthError, AuthErrorKind, InternalError

DEFAULT_BCRYPT_ROUNDS = 10
USER_ID_CLAIM = "user_id"


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    The digest is base64-encoded (44 bytes) so it never contains NUL bytes
    and stays under bcrypt's 72-byte limit.
    """
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. A mismatch is simply False."""
    pre_hashed = _pre_hash_password(plain_password)
    try:
        return bcrypt.checkpw(pre_hashed, hashed_password.encode("utf-8"))
    except ValueError as e:
        # bcrypt rejects digests it cannot parse ("Invalid salt")
        raise InternalError("Server error") from e


def get_password_hash(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """
    Hash a password with a fresh salt.
    The returned $2b$ digest embeds cost and salt, so verify needs nothing else.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(pre_hashed, salt)
    # Return as string for database storage
    return hashed.decode("utf-8")


def create_access_token(
    user_id,
    settings: Settings,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create a JWT access token carrying the user id as its only claim."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {USER_ID_CLAIM: str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> str:
    """
    Verify a JWT token and return the user id it carries.

    Raises:
        AuthError: kind EXPIRED when past its expiry, INVALID for anything
            else (bad signature, malformed token, missing claim).
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError as e:
        raise AuthError("Token has expired", kind=AuthErrorKind.EXPIRED) from e
    except JWTError as e:
        raise AuthError("Invalid token", kind=AuthErrorKind.INVALID) from e

    user_id = payload.get(USER_ID_CLAIM)
    if not user_id:
        raise AuthError("Invalid token", kind=AuthErrorKind.INVALID)
    return user_id
