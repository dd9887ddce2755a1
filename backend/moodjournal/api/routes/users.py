"""
Current-user account routes.
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from moodjournal.api.dependencies import CurrentUser, get_current_user
from moodjournal.core.config import Settings, get_settings
from moodjournal.core.errors import NotFoundError, ValidationError
from moodjournal.core.security import get_password_hash, verify_password
from moodjournal.db.session import get_db
from moodjournal.models.user import User
from moodjournal.schemas.user import PasswordChange, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _load_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get current user information."""
    return UserResponse.model_validate(_load_user(db, current_user.id))


@router.put("/me/password")
def change_password(
    password_data: PasswordChange,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Replace the current user's password after checking the old one."""
    user = _load_user(db, current_user.id)
    
    if not verify_password(password_data.current_password, user.hashed_password):
        raise ValidationError("Current password is incorrect")
    
    user.hashed_password = get_password_hash(password_data.new_password, rounds=settings.BCRYPT_ROUNDS)
    db.commit()
    
    logger.info(f"User {user.id} changed password")
    return {"message": "Password updated successfully"}
