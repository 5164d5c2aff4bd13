"""
Registration and login endpoints.

Passwords are hashed before they reach the store and no response ever
contains the stored hash.
"""

from fastapi import APIRouter, Depends, status

from account_api.app.core.store import RecordStore, get_store
from account_api.app.schemas.user import RegisterResponse, UserCreate, UserLogin, UserRead
from account_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate, store: RecordStore = Depends(get_store)) -> RegisterResponse:
    """Register a new user.

    ``email``, ``password`` and ``fullname`` are required (400 if any is
    missing); an email that is already registered yields 409.
    """
    summary = await UserService.register(store, user)
    return RegisterResponse(message="User registered", user=summary)


@router.post("/login", response_model=UserRead, response_model_exclude_none=True)
async def login_user(credentials: UserLogin, store: RecordStore = Depends(get_store)) -> UserRead:
    """Check email and password and return the user's profile.

    Unknown emails and wrong passwords both yield the same 401 response.
    """
    return await UserService.authenticate(store, credentials.email, credentials.password)
