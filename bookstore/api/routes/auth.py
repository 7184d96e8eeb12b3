from fastapi import APIRouter
from starlette.status import HTTP_201_CREATED

from bookstore.api.deps import CurrentUser, DbSession
from bookstore.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenData,
    UserProfile,
    UserRead,
)
from bookstore.schemas.common import ApiResponse
from bookstore.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[UserRead], status_code=HTTP_201_CREATED)
def register(data: RegisterRequest, db: DbSession):
    user = AuthService.register(db, data)
    return ApiResponse[UserRead](
        message="User registered successfully",
        data=UserRead.model_validate(user),
    )


@router.post("/login", response_model=ApiResponse[TokenData])
def login(data: LoginRequest, db: DbSession):
    return ApiResponse[TokenData](
        message="Login successful",
        data=AuthService.login(db, data),
    )


@router.get("/me", response_model=ApiResponse[UserProfile])
def me(user: CurrentUser, db: DbSession):
    profile = AuthService.get_profile(db, user)
    return ApiResponse[UserProfile](
        message="User profile retrieved successfully",
        data=UserProfile.model_validate(profile),
    )
