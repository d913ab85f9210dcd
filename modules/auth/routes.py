"""
Authentication API endpoints.

Provides signup and signin. Neither endpoint requires a token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import (
    AccountSummary,
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
)

router = APIRouter()


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=201,
    responses={400: {"description": "Validation failed or email already registered"}},
)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SignupResponse:
    """
    Register a new user.
    """
    account = await service.register(request.name, request.email, request.password)
    return SignupResponse(
        message="User created successfully",
        user=AccountSummary(id=account.id, email=account.email),
    )


@router.post(
    "/signin",
    response_model=SigninResponse,
    responses={400: {"description": "Invalid email or password"}},
)
async def signin(
    request: SigninRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SigninResponse:
    """
    Sign in and receive a bearer token.

    The token is valid for two hours by default.
    """
    token = await service.signin(request.email, request.password)
    return SigninResponse(message="Login successful", token=token)
