"""
Password hashing.

Passwords are stored only as salted one-way hashes produced by werkzeug.
"""

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash


def normalize_email(email: str) -> str:
    """Emails are matched trimmed and case-folded."""
    return email.strip().lower()


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """Check a password against a stored hash; unrecognised hashes never match."""
    if not password_hash:
        return False
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        return False
