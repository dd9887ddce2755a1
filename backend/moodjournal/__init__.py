"""MoodJournal backend package."""
