"""
Journal entry model with stored sentiment.
"""
import enum
from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from moodjournal.db.base import BaseModel


class SentimentLabel(str, enum.Enum):
    """Three-way sentiment label."""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class JournalEntry(BaseModel):
    """A journal entry owned by exactly one user."""
    __tablename__ = "journal_entries"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    sentiment_score = Column(Float, nullable=False, default=0.0)
    # Stored as computed when the text was last scored; never recomputed on read
    sentiment_label = Column(String(10), nullable=False, default=SentimentLabel.NEUTRAL.value)
    
    # Relationships
    user = relationship("User", back_populates="journal_entries")
