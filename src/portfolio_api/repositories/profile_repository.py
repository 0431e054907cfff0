"""
Profile Repository

Data access layer for researcher profiles, the one resource saved by upsert.
"""

from typing import Any, Dict, Optional, Tuple

from portfolio_api.core.exceptions import DatabaseException, DuplicateException
from portfolio_api.db.adapter import StorageBackend
from portfolio_api.db.serialization import dump_list, load_list, utc_now_iso
from portfolio_api.models.profile import LIST_COLUMNS, Profile
from portfolio_api.repositories.base import BaseRepository


# Column -> camelCase key of the profile view
PROFILE_FIELDS = {
    "user_email": "userEmail",
    "full_name": "fullName",
    "designation": "designation",
    "department": "department",
    "institution": "institution",
    "office_address": "officeAddress",
    "official_email": "officialEmail",
    "alternate_email": "alternateEmail",
    "phone": "phone",
    "website": "website",
    "degrees": "degrees",
    "employment": "employment",
    "research_keywords": "researchKeywords",
    "research_description": "researchDescription",
    "scholar_link": "scholarLink",
    "courses": "courses",
    "grants": "grants",
    "professional_activities": "professionalActivities",
    "awards": "awards",
    "skills": "skills",
    "outreach_service": "outreachService",
}

CONTENT_COLUMNS = tuple(column for column in PROFILE_FIELDS if column != "user_email")


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profiles.

    ``save`` is check-then-write: two concurrent first saves for the same
    email can race, and the loser then fails on the unique ``user_email``.
    """

    label = "profile"
    plural = "profiles"
    insert_columns = ("user_email",) + CONTENT_COLUMNS + ("created_date", "modified_date")
    update_columns = CONTENT_COLUMNS + ("modified_date",)
    required = ("user_email",)
    required_message = "User email is required."

    def __init__(self, storage: StorageBackend):
        super().__init__(Profile, storage)

    def prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        for column in LIST_COLUMNS:
            values[column] = dump_list(values.get(column))
        return values

    def to_record(self, row: Dict[str, Any]) -> Dict[str, Any]:
        record = dict(row)
        for column in LIST_COLUMNS:
            record[column] = load_list(record.get(column))
        return record

    @staticmethod
    def to_profile(record: Dict[str, Any]) -> Dict[str, Any]:
        """Project a record into the camelCase profile view."""
        return {key: record.get(column) for column, key in PROFILE_FIELDS.items()}

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        try:
            row = self.storage.fetch_one("SELECT * FROM profiles WHERE user_email = ?", [email])
        except DatabaseException as e:
            raise DatabaseException("Error fetching profile.", e.details) from e
        return self.to_record(row) if row is not None else None

    def save(self, values: Dict[str, Any]) -> Tuple[str, int]:
        """
        Create the profile or fully replace the existing one.

        Returns:
            ("created", new id) or ("updated", rows affected)
        """
        values = dict(values)
        self._validate(values)
        email = values["user_email"]

        try:
            existing = self.storage.fetch_one("SELECT id FROM profiles WHERE user_email = ?", [email])
        except DatabaseException as e:
            raise DatabaseException("Error saving profile.", e.details) from e

        now = utc_now_iso()
        values = self.prepare(dict(values, modified_date=now))

        if existing:
            assignments = ", ".join(f"{column} = ?" for column in self.update_columns)
            args = [values.get(column) for column in self.update_columns] + [email]
            try:
                result = self.storage.execute(
                    f"UPDATE profiles SET {assignments} WHERE user_email = ?", args
                )
            except DatabaseException as e:
                raise DatabaseException("Error updating profile.", e.details) from e
            return "updated", result.rowcount

        values["created_date"] = now
        try:
            record = self._insert(self.insert_columns, values)
        except DuplicateException as e:
            raise DuplicateException("Profile", "user_email", email, message="Profile already exists.") from e
        except DatabaseException as e:
            raise DatabaseException("Error creating profile.", e.details) from e
        return "created", record["id"]

    def delete_by_email(self, email: str) -> int:
        try:
            result = self.storage.execute("DELETE FROM profiles WHERE user_email = ?", [email])
        except DatabaseException as e:
            raise DatabaseException("Error deleting profile.", e.details) from e
        return result.rowcount
