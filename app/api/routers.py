from fastapi import APIRouter

from app.api.v1.changelog import router as changelog_router
from app.api.v1.github import router as github_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(changelog_router)
api_router.include_router(github_router)
