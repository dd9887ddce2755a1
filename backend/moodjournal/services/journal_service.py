"""
Owner-scoped journal entry operations.

Every mutating operation loads the entry first (404 when absent) and then
checks that it belongs to the requesting user (403 otherwise).
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from moodjournal.core.errors import ForbiddenError, NotFoundError, ValidationError
from moodjournal.models.journal import JournalEntry
from moodjournal.services.sentiment_service import analyze_sentiment

logger = logging.getLogger(__name__)

ENTRY_NOT_FOUND = "Journal entry not found"
NO_ENTRIES_FOUND = "No journal entries found."


def _require_text(text: Optional[str]) -> str:
    if text is None or not text.strip():
        raise ValidationError("Journal entry is required!")
    return text


def create_entry(db: Session, user_id: int, text: Optional[str]) -> JournalEntry:
    """Score the text and store it as a new entry for ``user_id``."""
    text = _require_text(text)
    sentiment = analyze_sentiment(text)

    entry = JournalEntry(
        user_id=user_id,
        text=text,
        sentiment_score=sentiment.score,
        sentiment_label=sentiment.label.value
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)

    logger.info(f"Created journal entry {entry.id} for user {user_id} ({entry.sentiment_label})")
    return entry


def list_entries(db: Session, user_id: int, newest_first: bool = True) -> List[JournalEntry]:
    """
    Return the user's entries ordered by creation time.
    An empty result raises NotFoundError rather than returning [].
    """
    if newest_first:
        order = (JournalEntry.created_at.desc(), JournalEntry.id.desc())
    else:
        order = (JournalEntry.created_at.asc(), JournalEntry.id.asc())

    entries = db.query(JournalEntry).filter(
        JournalEntry.user_id == user_id
    ).order_by(*order).all()

    if not entries:
        raise NotFoundError(NO_ENTRIES_FOUND)
    return entries


def get_entry(db: Session, entry_id: int) -> JournalEntry:
    """Load an entry by id regardless of owner."""
    entry = db.query(JournalEntry).filter(JournalEntry.id == entry_id).first()
    if not entry:
        raise NotFoundError(ENTRY_NOT_FOUND)
    return entry


def get_owned_entry(db: Session, entry_id: int, user_id: int, action: str = "access") -> JournalEntry:
    """Load an entry and check that ``user_id`` owns it."""
    entry = get_entry(db, entry_id)
    if entry.user_id != user_id:
        logger.warning(f"User {user_id} tried to {action} journal entry {entry_id} owned by another user")
        raise ForbiddenError(f"Not authorized to {action} this entry")
    return entry


def update_entry(db: Session, entry_id: int, user_id: int, text: Optional[str]) -> JournalEntry:
    """
    Replace the text of an owned entry.

    Omitted text leaves the entry unchanged. Changed text is re-scored so the
    stored label always matches the stored text.
    """
    entry = get_owned_entry(db, entry_id, user_id, action="update")

    if text is not None:
        text = _require_text(text)
        if text != entry.text:
            sentiment = analyze_sentiment(text)
            entry.text = text
            entry.sentiment_score = sentiment.score
            entry.sentiment_label = sentiment.label.value
            db.commit()
            db.refresh(entry)

    return entry


def delete_entry(db: Session, entry_id: int, user_id: int) -> None:
    """Delete an owned entry."""
    entry = get_owned_entry(db, entry_id, user_id, action="delete")
    db.delete(entry)
    db.commit()
    logger.info(f"Deleted journal entry {entry_id} for user {user_id}")
