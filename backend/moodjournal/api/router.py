"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from moodjournal.api.routes import auth, users, journal

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(journal.router)
