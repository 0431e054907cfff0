"""
Profile API

One researcher profile per owner email, saved by upsert.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from portfolio_api.core.dependencies import get_profile_repository
from portfolio_api.repositories.profile_repository import ProfileRepository
from portfolio_api.schemas.profile import ProfileRequest


profile_api_router = APIRouter(prefix="/profile", tags=["Profile"])


@profile_api_router.get("/{email}", response_model=Optional[Dict[str, Any]])
def get_profile(email: str, repo: ProfileRepository = Depends(get_profile_repository)):
    """The camelCase profile, or ``null`` (200) when none has been saved."""
    record = repo.get_by_email(email)
    if record is None:
        return None
    return repo.to_profile(record)


@profile_api_router.post("")
def save_profile(request: ProfileRequest, repo: ProfileRepository = Depends(get_profile_repository)):
    """
    Create the profile or replace every field of the existing one.

    Returns ``{message, id}`` on creation and ``{message, updated}`` on update.
    """
    action, value = repo.save(request.model_dump())
    if action == "created":
        return {"message": "Profile created successfully", "id": value}
    return {"message": "Profile updated successfully", "updated": value}


@profile_api_router.delete("/{email}")
def delete_profile(email: str, repo: ProfileRepository = Depends(get_profile_repository)):
    return {"deleted": repo.delete_by_email(email), "message": "Profile deleted successfully"}
