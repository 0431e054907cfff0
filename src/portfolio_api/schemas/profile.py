"""
Profile Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional


class ProfileRequest(BaseModel):
    """
    Researcher profile body (camelCase).

    ``degrees``, ``employment``, ``courses``, ``grants`` and ``awards`` are
    lists of free-form entries, e.g. ``{"degree": "PhD", "institution": "MIT",
    "year": "2019"}``. The remaining fields are plain text; ``researchKeywords``
    is a comma separated list.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_email: Optional[str] = None
    full_name: Optional[str] = None
    designation: Optional[str] = None
    department: Optional[str] = None
    institution: Optional[str] = None
    office_address: Optional[str] = None
    official_email: Optional[str] = None
    alternate_email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    degrees: Optional[List[Any]] = None
    employment: Optional[List[Any]] = None
    research_keywords: Optional[str] = None
    research_description: Optional[str] = None
    scholar_link: Optional[str] = None
    courses: Optional[List[Any]] = None
    grants: Optional[List[Any]] = None
    professional_activities: Optional[str] = None
    awards: Optional[List[Any]] = None
    skills: Optional[str] = None
    outreach_service: Optional[str] = None
