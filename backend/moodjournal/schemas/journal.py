"""
Pydantic schemas for JournalEntry entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class JournalEntryCreate(BaseModel):
    """Schema for journal entry creation."""
    text: Optional[str] = None


class JournalEntryUpdate(BaseModel):
    """Schema for journal entry update. Omitted text keeps the old text."""
    text: Optional[str] = None


class JournalEntryResponse(BaseModel):
    """Projection returned by list, trend and single-entry reads."""
    id: int
    text: str
    score: float = Field(validation_alias="sentiment_score")
    label: str = Field(validation_alias="sentiment_label")
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
        populate_by_name = True


class JournalEntryMessage(BaseModel):
    """Create/update response: a status message plus the entry."""
    message: str
    entry: JournalEntryResponse


class RecommendationRequest(BaseModel):
    """Previously computed sentiment for which to build a recommendation."""
    label: Optional[str] = None
    score: Optional[float] = None


class RecommendationResponse(BaseModel):
    message: str = "Mood recommendations generated successfully"
    recommendation: str
