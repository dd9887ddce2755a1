"""
User model for authentication.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship, validates
from moodjournal.db.base import BaseModel


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively and stored trimmed."""
    return email.strip().lower()


class User(BaseModel):
    """User credentials: unique email plus a bcrypt digest."""
    __tablename__ = "users"
    
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    
    # Relationships
    journal_entries = relationship("JournalEntry", back_populates="user", cascade="all, delete-orphan")

    @validates("email")
    def _normalize_email(self, key, value):
        return normalize_email(value)
