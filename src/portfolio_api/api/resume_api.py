"""
Resume API
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from portfolio_api.core.dependencies import get_profile_repository
from portfolio_api.core.exceptions import DatabaseException
from portfolio_api.repositories.profile_repository import ProfileRepository
from portfolio_api.services.resume_service import render_error, render_not_found, render_resume
import logging

logger = logging.getLogger("RESUME_API")

resume_api_router = APIRouter(tags=["Resume"])


@resume_api_router.get("/generate-resume/{email}", response_class=HTMLResponse)
def generate_resume(email: str, repo: ProfileRepository = Depends(get_profile_repository)):
    """Printable HTML resume built from the owner's profile."""
    try:
        profile = repo.get_by_email(email)
    except DatabaseException as e:
        logger.error(f"Resume generation failed for {email}: {e.details}")
        return HTMLResponse(render_error(), status_code=500)

    if profile is None:
        return HTMLResponse(render_not_found(), status_code=404)
    return HTMLResponse(render_resume(profile))
