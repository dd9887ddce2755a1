"""
Authentication routes for registration and login.
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from moodjournal.core.config import Settings, get_settings
from moodjournal.core.errors import ValidationError
from moodjournal.core.security import verify_password, get_password_hash, create_access_token
from moodjournal.db.session import get_db
from moodjournal.models.user import User
from moodjournal.schemas.user import UserCreate, UserLogin, Token, RegisterResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Register a new user."""
    existing_user = db.query(User).filter(User.email == user_data.email).first()
    if existing_user:
        raise ValidationError("User already exists")
    
    new_user = User(
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password, rounds=settings.BCRYPT_ROUNDS)
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ValidationError("User already exists") from e
    db.refresh(new_user)
    
    logger.info(f"Registered user {new_user.id}")
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(new_user)
    )


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Login and get JWT token."""
    user = db.query(User).filter(User.email == credentials.email).first()
    
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.info("Failed login attempt")
        raise ValidationError(INVALID_CREDENTIALS)
    
    token = create_access_token(user.id, settings)
    logger.info(f"User {user.id} logged in")
    return Token(message="Login successful", token=token)
