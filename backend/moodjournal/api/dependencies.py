"""
Shared route dependencies: the auth gate and service providers.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, Header
from moodjournal.core.config import Settings, get_settings
from moodjournal.core.errors import AuthError, AuthErrorKind
from moodjournal.core.security import decode_access_token
from moodjournal.services.recommendation_service import RecommendationComposer

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class CurrentUser:
    """Identity of the authenticated caller, taken from the token claim."""
    id: int


def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings)
) -> CurrentUser:
    """
    Authenticate the request from its ``Authorization: Bearer <token>`` header.

    The user id claim is trusted as-is: the credential store is not queried
    here, so a token stays usable for its lifetime even if the account changes.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError("Not authorized, no token", kind=AuthErrorKind.MISSING)

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthError("Not authorized, no token", kind=AuthErrorKind.MISSING)

    try:
        user_id = decode_access_token(token, settings)
        return CurrentUser(id=int(user_id))
    except (AuthError, ValueError) as e:
        kind = e.kind.value if isinstance(e, AuthError) else AuthErrorKind.INVALID.value
        logger.info(f"Rejected bearer token ({kind})")
        raise AuthError("Not authorized, invalid token", kind=AuthErrorKind.INVALID) from e


def get_recommendation_composer(
    settings: Settings = Depends(get_settings)
) -> RecommendationComposer:
    """Provide a composer bound to the current settings."""
    return RecommendationComposer(settings)
