"""User API endpoints."""

from fastapi import APIRouter, Depends, status

from marketplace.application.dtos.user_dto import UserData, UserResponseData
from marketplace.application.services.account_service import AccountService
from marketplace.presentation.dependencies import get_account_service
from marketplace.presentation.error_schemas import ErrorResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserResponseData,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a user account with the 'user' role.",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_user(
    dto: UserData,
    service: AccountService = Depends(get_account_service),
) -> UserResponseData:
    """
    Create a new user.

    Rejected fields raise InvalidArgumentError, which the global exception
    handler turns into a 400 carrying the rejection reason.
    """
    return service.create_user(dto)
