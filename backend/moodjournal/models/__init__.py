"""Models package - Import all models for SQLAlchemy registration."""
from moodjournal.models.user import User
from moodjournal.models.journal import JournalEntry, SentimentLabel

__all__ = [
    "User",
    "JournalEntry",
    "SentimentLabel",
]
