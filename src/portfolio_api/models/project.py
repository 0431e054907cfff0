"""
Project ORM models.

Projects carry a progress counter, a serialized colleague list and the columns
of the project description sheet. Colleagues and meetings hang off projects by
plain value references; nothing cascades.
"""

from sqlalchemy import Column, Integer, Text

from portfolio_api.models.base import Base, IdMixin


# Columns of the description sheet, in the order the sheet lists them
DESCRIPTION_COLUMNS = (
    "project_title",
    "notes",
    "colleague_name",
    "colleague_phone",
    "colleague_email",
    "colleague_address1",
    "colleague_address2",
    "colleague_address3",
    "your_name",
    "your_phone",
    "your_email",
    "your_address1",
    "your_address2",
    "your_address3",
    "objectives",
    "timeline",
    "primary_audience",
    "secondary_audience",
    "call_action",
    "competition",
    "graphics",
    "photography",
    "multimedia",
    "other_info",
    "client_name",
    "client_comments",
    "approval_date",
    "approval_signature",
)


class Project(IdMixin, Base):
    """Project owned by ``owner_email``."""

    __tablename__ = "projects"

    name = Column(Text)
    owner_email = Column(Text, index=True)
    colleagues = Column(Text, default="[]", server_default="[]")
    progress = Column(Integer, default=0, server_default="0")

    # Description sheet
    project_title = Column(Text)
    notes = Column(Text)
    colleague_name = Column(Text)
    colleague_phone = Column(Text)
    colleague_email = Column(Text)
    colleague_address1 = Column(Text)
    colleague_address2 = Column(Text)
    colleague_address3 = Column(Text)
    your_name = Column(Text)
    your_phone = Column(Text)
    your_email = Column(Text)
    your_address1 = Column(Text)
    your_address2 = Column(Text)
    your_address3 = Column(Text)
    objectives = Column(Text)
    timeline = Column(Text)
    primary_audience = Column(Text)
    secondary_audience = Column(Text)
    call_action = Column(Text)
    competition = Column(Text)
    graphics = Column(Text)
    photography = Column(Text)
    multimedia = Column(Text)
    other_info = Column(Text)
    client_name = Column(Text)
    client_comments = Column(Text)
    approval_date = Column(Text)
    approval_signature = Column(Text)

    # Free-text columns added by later schema versions
    idea = Column(Text)
    career_goals = Column(Text)
    future_work = Column(Text)
    deadlines = Column(Text)


class Colleague(IdMixin, Base):
    """Colleague attached to a project. ``project_id`` is not enforced as a foreign key."""

    __tablename__ = "colleagues"

    project_id = Column(Integer, index=True)
    name = Column(Text)
    email = Column(Text)


class Meeting(IdMixin, Base):
    """Meeting with a colleague, keyed by the colleague's email."""

    __tablename__ = "meetings"

    colleague_email = Column(Text, index=True)
    date = Column(Text)
    description = Column(Text)
