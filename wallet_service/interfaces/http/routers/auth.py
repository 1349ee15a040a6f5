"""Registration and login endpoints."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from wallet_service.interfaces.http.deps import get_auth_service
from wallet_service.interfaces.http.responses import render
from wallet_service.modules.accounts import AccessToken, AuthService, UserSummary
from wallet_service.schemas import ApiResponse, TokenResponse, UserCredentials, UserResponse

router = APIRouter()


def _to_user_response(user: UserSummary) -> UserResponse:
    return UserResponse(id=user.id, phone_number=user.phone_number)


def _to_token_response(token: AccessToken) -> TokenResponse:
    return TokenResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
    )


@router.post("/register", response_model=ApiResponse[UserResponse], summary="Register a user")
async def register(
    payload: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    result = await auth_service.register_user(payload.phone_number, payload.password)
    return render(result, _to_user_response)


@router.post("/login", response_model=ApiResponse[TokenResponse], summary="Log in and obtain a session token")
async def login(
    payload: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    result = await auth_service.login(payload.phone_number, payload.password)
    return render(result, _to_token_response)
