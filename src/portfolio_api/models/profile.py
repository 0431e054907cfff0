"""
Profile ORM model.

One researcher profile per identity. The five list-valued sections are stored
as JSON text.
"""

from sqlalchemy import Column, Text

from portfolio_api.models.base import Base, IdMixin, TimestampMixin


LIST_COLUMNS = ("degrees", "employment", "courses", "grants", "awards")


class Profile(IdMixin, TimestampMixin, Base):
    """Researcher profile; ``user_email`` is unique."""

    __tablename__ = "profiles"

    user_email = Column(Text, unique=True)
    full_name = Column(Text)
    designation = Column(Text)
    department = Column(Text)
    institution = Column(Text)
    office_address = Column(Text)
    official_email = Column(Text)
    alternate_email = Column(Text)
    phone = Column(Text)
    website = Column(Text)
    degrees = Column(Text)
    employment = Column(Text)
    research_keywords = Column(Text)
    research_description = Column(Text)
    scholar_link = Column(Text)
    courses = Column(Text)
    grants = Column(Text)
    professional_activities = Column(Text)
    awards = Column(Text)
    skills = Column(Text)
    outreach_service = Column(Text)
