"""
Journal entry routes: CRUD, sentiment trend and mood recommendations.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from moodjournal.api.dependencies import CurrentUser, get_current_user, get_recommendation_composer
from moodjournal.core.errors import ValidationError
from moodjournal.db.session import get_db
from moodjournal.schemas.journal import (
    JournalEntryCreate, JournalEntryUpdate, JournalEntryResponse,
    JournalEntryMessage, RecommendationRequest, RecommendationResponse
)
from moodjournal.services import journal_service
from moodjournal.services.recommendation_service import RecommendationComposer

router = APIRouter(prefix="/journal", tags=["journal"])


def _to_response(entries) -> List[JournalEntryResponse]:
    return [JournalEntryResponse.model_validate(entry) for entry in entries]


@router.post("", response_model=JournalEntryMessage, status_code=status.HTTP_201_CREATED)
def create_journal_entry(
    entry_data: JournalEntryCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a journal entry, scored for sentiment at submission time."""
    entry = journal_service.create_entry(db, current_user.id, entry_data.text)
    return JournalEntryMessage(
        message="Journal entry created successfully",
        entry=JournalEntryResponse.model_validate(entry)
    )


@router.get("", response_model=List[JournalEntryResponse])
def list_journal_entries(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's entries, newest first."""
    return _to_response(journal_service.list_entries(db, current_user.id, newest_first=True))


@router.get("/trend", response_model=List[JournalEntryResponse])
def track_sentiment(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Sentiment over time: the current user's entries, oldest first."""
    return _to_response(journal_service.list_entries(db, current_user.id, newest_first=False))


@router.post("/recommend", response_model=RecommendationResponse)
async def recommend_mood_activities(
    request_data: RecommendationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    composer: RecommendationComposer = Depends(get_recommendation_composer)
):
    """Get AI-generated mood recommendations for a previously computed sentiment."""
    if not request_data.label or request_data.score is None:
        raise ValidationError("Sentiment analysis data is required!")

    recommendation = await composer.recommend(request_data.label, request_data.score)
    return RecommendationResponse(recommendation=recommendation)


@router.get("/{entry_id}", response_model=JournalEntryResponse)
def get_journal_entry(
    entry_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get one of the current user's entries."""
    entry = journal_service.get_owned_entry(db, entry_id, current_user.id)
    return JournalEntryResponse.model_validate(entry)


@router.put("/{entry_id}", response_model=JournalEntryMessage)
def update_journal_entry(
    entry_id: int,
    entry_data: JournalEntryUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the text of an entry owned by the current user."""
    entry = journal_service.update_entry(db, entry_id, current_user.id, entry_data.text)
    return JournalEntryMessage(
        message="Journal entry updated successfully",
        entry=JournalEntryResponse.model_validate(entry)
    )


@router.delete("/{entry_id}")
def delete_journal_entry(
    entry_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an entry owned by the current user."""
    journal_service.delete_entry(db, entry_id, current_user.id)
    return {"message": "Journal entry deleted successfully"}
