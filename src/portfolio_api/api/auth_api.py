"""
Identity API

Registration and credential checks. No session or token is issued: a
successful login is a one-shot confirmation.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from portfolio_api.core.config import Settings
from portfolio_api.core.dependencies import get_app_settings, get_user_repository
from portfolio_api.core.exceptions import DatabaseException, DuplicateException
from portfolio_api.core.security import hash_password, normalize_email, verify_password
from portfolio_api.repositories.user_repository import UserRepository
from portfolio_api.schemas.auth import (
    AuthFailureResponse,
    CredentialsRequest,
    LoginResponse,
    RegisterResponse,
)
import logging

logger = logging.getLogger("AUTH_API")

auth_api_router = APIRouter(tags=["Identity"])

FAILURES = {400: {"model": AuthFailureResponse}, 500: {"model": AuthFailureResponse}}


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@auth_api_router.post("/register", response_model=RegisterResponse, responses=FAILURES)
@auth_api_router.post("/signup", response_model=RegisterResponse, include_in_schema=False)
def register(
    request: CredentialsRequest,
    repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    """Create an account. ``/signup`` is kept as an alias for older clients."""
    email = normalize_email(request.email or "")
    if not email or not request.password:
        return _failure(400, "Email and password are required.")

    if len(request.password) < settings.min_password_length:
        return _failure(
            400, f"Password must be at least {settings.min_password_length} characters long."
        )

    try:
        user_id = repo.create_user(email, hash_password(request.password))
    except DuplicateException as e:
        logger.info(f"Registration refused for existing account {email}")
        return _failure(400, e.message)
    except DatabaseException as e:
        logger.error(f"Registration failed for {email}: {e.details}")
        return _failure(500, e.message)

    logger.info(f"Registered user #{user_id}")
    return RegisterResponse(id=user_id, email=email)


@auth_api_router.post("/login", response_model=LoginResponse, responses=FAILURES)
def login(request: CredentialsRequest, repo: UserRepository = Depends(get_user_repository)):
    email = normalize_email(request.email or "")
    if not email or not request.password:
        return _failure(400, "Email and password are required.")

    try:
        user = repo.get_by_email(email)
    except DatabaseException as e:
        logger.error(f"Login lookup failed: {e.details}")
        return _failure(500, e.message)

    # Unknown email and wrong password answer identically
    if user is None or not verify_password(request.password, user.get("password")):
        return _failure(400, "Invalid credentials.")

    return LoginResponse(email=user["email"])
