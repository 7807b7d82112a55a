"""
Router for Auth module
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.schemas import LoginRequest, ProfileResponse, SessionProfile, LogoutResponse
from src.auth.service import AuthService
from src.auth.dependencies import get_auth_service, get_current_profile, store_session_profile
from src.auth.constants import LOGOUT_SUCCESSFUL
from src.users.schemas import UserCreate
from src.users.constants import BLANK_PASSWORD, MASKED_PASSWORD
from src.database import get_db

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: Request,
    user_data: UserCreate,
    service: AuthService = Depends(get_auth_service),
    db: AsyncSession = Depends(get_db)
):
    """Register a new user and log them in"""
    profile = await service.signup(user_data, db)
    store_session_profile(request, profile)
    return ProfileResponse(**profile.model_dump(), password=BLANK_PASSWORD)


@router.post("/login", response_model=ProfileResponse)
async def login(
    request: Request,
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
    db: AsyncSession = Depends(get_db)
):
    """Log in with username and password; the session is only set on success"""
    profile = await service.login(login_data.username, login_data.password, db)
    store_session_profile(request, profile)
    return ProfileResponse(**profile.model_dump(), password=MASKED_PASSWORD)


@router.post("/logout", response_model=LogoutResponse)
async def logout(request: Request):
    request.session.clear()
    return LogoutResponse(message=LOGOUT_SUCCESSFUL)


@router.get("/profile", response_model=ProfileResponse)
async def profile(current: SessionProfile = Depends(get_current_profile)):
    """The logged in user"""
    return ProfileResponse(**current.model_dump(), password=BLANK_PASSWORD)
