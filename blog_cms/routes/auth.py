"""Authentication routes for the admin login session."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from blog_cms.configs import settings
from blog_cms.dependencies import AuthServiceDep
from blog_cms.managers import limiter
from blog_cms.schemas.auth import LoginRequest, RefreshTokenRequest, TokenResponse
from blog_cms.schemas.common import MessageResponse

router = APIRouter(prefix="/auth", tags=["🔐 Auth"])

TOKEN_EXAMPLE = {
    "success": True,
    "accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "refreshToken": "3q2-7wQk0d9v...",
}


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=TokenResponse,
    summary="Admin login",
    description="Authenticate the admin with email and password to obtain a token pair.",
    responses={
        200: {"content": {"application/json": {"example": TOKEN_EXAMPLE}}},
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "Invalid credentials"},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error": "Too many requests from this IP, please try again later",
                    },
                },
            },
        },
    },
    operation_id="auth_login",
)
@limiter.limit(settings.RATE_LIMIT_LOGIN)
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: AuthServiceDep,
) -> TokenResponse:
    """
    Login with email and password.

    Parameters
    ----------
    request : Request
        Current request context, used by the rate limiter.
    body : LoginRequest
        Email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    TokenResponse
        New access and refresh tokens. Any earlier session is replaced.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    pair = await auth_service.login(str(body.email), body.password)
    return TokenResponse(access_token=pair.access_token, refresh_token=pair.refresh_token)


@router.post(
    "/refresh",
    response_class=ORJSONResponse,
    response_model=TokenResponse,
    summary="Rotate tokens",
    description="Exchange the current refresh token for a new token pair.",
    responses={
        200: {"content": {"application/json": {"example": TOKEN_EXAMPLE}}},
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "Invalid refresh token"},
                },
            },
        },
    },
    operation_id="auth_refresh",
)
async def refresh(body: RefreshTokenRequest, auth_service: AuthServiceDep) -> TokenResponse:
    """
    Rotate the refresh token.

    Parameters
    ----------
    body : RefreshTokenRequest
        The refresh token currently held by the client.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    TokenResponse
        New token pair; the presented refresh token stops working.

    Raises
    ------
    InvalidRefreshTokenError
        If the token is not the live session token.
    """
    pair = await auth_service.refresh(body.refresh_token)
    return TokenResponse(access_token=pair.access_token, refresh_token=pair.refresh_token)


@router.post(
    "/logout",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Logout",
    description="Revoke the admin session bound to the refresh token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"success": True, "message": "Logged out successfully"},
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "Invalid refresh token"},
                },
            },
        },
    },
    operation_id="auth_logout",
)
async def logout(body: RefreshTokenRequest, auth_service: AuthServiceDep) -> MessageResponse:
    """
    Revoke the session.

    Access tokens already issued stay valid until they expire.

    Raises
    ------
    InvalidRefreshTokenError
        If the token is not the live session token.
    """
    await auth_service.logout(body.refresh_token)
    return MessageResponse(message="Logged out successfully")
