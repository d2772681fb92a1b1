"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from billing_api.api.dependencies import CurrentUserId, get_account_service
from billing_api.schemas.auth import (
    AccountCreate,
    AccountCreatedResponse,
    PasswordLogin,
    PasswordRecoverRequest,
    PasswordReset,
    ProfileResponse,
    ProfileUser,
    TokenResponse,
)
from billing_api.services.accounts import AccountService

router = APIRouter(tags=["auth"])


@router.post(
    "/accounts",
    response_model=AccountCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new account",
)
def create_account(
    account_data: AccountCreate,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new user."""
    user_id = accounts.register(account_data.email, account_data.password, account_data.name)
    return AccountCreatedResponse(user_id=user_id)


@router.post(
    "/sessions/password",
    response_model=TokenResponse,
    summary="Authenticate with email & password",
)
def authenticate_with_password(
    credentials: PasswordLogin,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Login with email and password."""
    token = accounts.authenticate_with_password(credentials.email, credentials.password)
    return TokenResponse(token=token)


@router.get("/profile", response_model=ProfileResponse, summary="Get authenticated user profile")
def get_profile(
    user_id: CurrentUserId,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Get current user information."""
    user = accounts.get_profile(user_id)
    return ProfileResponse(user=ProfileUser.model_validate(user))


@router.post(
    "/password/recover",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Request password recover",
)
def request_password_recover(
    recover_data: PasswordRecoverRequest,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Issue a recovery code. Responds the same whether or not the email exists."""
    accounts.request_password_recover(recover_data.email)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post(
    "/password/reset",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Reset password",
)
def reset_password(
    reset_data: PasswordReset,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Set a new password with a recovery code."""
    accounts.reset_password(reset_data.token, reset_data.password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
