"""
Project Pydantic Schemas

Projects, their description sheet, colleagues and meetings.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional, Union


class ProjectCreate(BaseModel):
    """Request schema for creating a project."""

    name: Optional[str] = None
    owner_email: Optional[str] = None
    # Either a list or an already serialized JSON string
    colleagues: Optional[Union[List[Any], str]] = None
    progress: Optional[int] = None


class ProjectUpdate(BaseModel):
    """Request schema for updating a project. Omitted progress is stored as 0."""

    name: Optional[str] = None
    colleagues: Optional[Union[List[Any], str]] = None
    progress: Optional[int] = None


class ProjectDescriptionUpdate(BaseModel):
    """
    The project description sheet.

    The body is camelCase (``projectTitle``, ``colleagueAddress1``...); fields
    map one to one onto the snake_case project columns. Every column is
    replaced, so omitted fields are cleared.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_title: Optional[str] = None
    notes: Optional[str] = None
    colleague_name: Optional[str] = None
    colleague_phone: Optional[str] = None
    colleague_email: Optional[str] = None
    colleague_address1: Optional[str] = None
    colleague_address2: Optional[str] = None
    colleague_address3: Optional[str] = None
    your_name: Optional[str] = None
    your_phone: Optional[str] = None
    your_email: Optional[str] = None
    your_address1: Optional[str] = None
    your_address2: Optional[str] = None
    your_address3: Optional[str] = None
    objectives: Optional[str] = None
    timeline: Optional[str] = None
    primary_audience: Optional[str] = None
    secondary_audience: Optional[str] = None
    call_action: Optional[str] = None
    competition: Optional[str] = None
    graphics: Optional[str] = None
    photography: Optional[str] = None
    multimedia: Optional[str] = None
    other_info: Optional[str] = None
    client_name: Optional[str] = None
    client_comments: Optional[str] = None
    approval_date: Optional[str] = None
    approval_signature: Optional[str] = None

    def to_columns(self) -> Dict[str, Any]:
        return self.model_dump()


class ColleagueCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class MeetingCreate(BaseModel):
    colleague_email: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
