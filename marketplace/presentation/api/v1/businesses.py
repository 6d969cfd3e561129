"""Business API endpoints."""

from fastapi import APIRouter, Depends, status

from marketplace.application.dtos.business_dto import BusinessData, BusinessResponseData
from marketplace.application.services.account_service import AccountService
from marketplace.presentation.dependencies import get_account_service
from marketplace.presentation.error_schemas import ErrorResponse

router = APIRouter(prefix="/businesses", tags=["businesses"])


@router.post(
    "",
    response_model=BusinessResponseData,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new business",
    description="Register an owner account with the 'business' role and an empty business.",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_business(
    dto: BusinessData,
    service: AccountService = Depends(get_account_service),
) -> BusinessResponseData:
    """Create a business and its owner account."""
    return service.create_business(dto)
