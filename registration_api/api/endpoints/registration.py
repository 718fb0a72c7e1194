import logging
from typing import Callable
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from registration_api.api.deps import get_password_hasher, get_user_store
from registration_api.db.models.user import User
from registration_api.db.repositories.user import UserStore
from registration_api.schemas.user import (
    AvailabilityResponse,
    MessageResponse,
    RegistrationResponse,
    UserCreate,
    UserRead,
)

logger = logging.getLogger(__name__)

router = APIRouter()

def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RegistrationResponse,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def register(
    user: UserCreate,
    request: Request,
    store: UserStore = Depends(get_user_store),
    hash_password: Callable[[str], str] = Depends(get_password_hasher),
):
    """
    Register a new user and open a session for them.
    - **username**: at least 3 characters
    - **password**: at least 3 characters
    - **email**: a valid email address
    - **Returns**: 201 with the created user, 400 if the username or email is taken
    """
    logger.info("Registration attempt received: username=%s email=%s", user.username, user.email)

    try:
        if await store.find_one(username=user.username):
            logger.info("Username %s already exists", user.username)
            return _message(status.HTTP_400_BAD_REQUEST, "Username taken")

        if await store.find_one(email=user.email):
            logger.info("Email %s already exists", user.email)
            return _message(status.HTTP_400_BAD_REQUEST, "Email previously registered")

        # bcrypt is CPU-bound; keep it off the event loop
        hashed_password = await run_in_threadpool(hash_password, user.password)
        new_user = User(
            username=user.username,
            password=hashed_password,
            email=user.email
        )
        # Snapshot taken before saving, so the session copy carries no id
        session_user = UserRead.model_validate(new_user)

        saved_user = await store.save(new_user)
        logger.info("New user registered: %s", saved_user.username)

        request.session["user"] = session_user.model_dump(mode="json")

        return {
            "message": "Registration successful",
            "user": UserRead.model_validate(saved_user),
        }
    except Exception:
        logger.exception("Registration error")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error creating user account")

@router.get(
    "/usercheck/{username}",
    response_model=AvailabilityResponse,
    responses={500: {"model": MessageResponse}},
)
async def check_username(username: str, store: UserStore = Depends(get_user_store)):
    try:
        existing_user = await store.find_one(username=username)
    except Exception:
        logger.exception("Username check error")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error checking username availability")
    return {"available": existing_user is None}

@router.get(
    "/emailcheck/{email}",
    response_model=AvailabilityResponse,
    responses={500: {"model": MessageResponse}},
)
async def check_email(email: str, store: UserStore = Depends(get_user_store)):
    try:
        existing_user = await store.find_one(email=email)
    except Exception:
        logger.exception("Email check error")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error checking email availability")
    return {"available": existing_user is None}
