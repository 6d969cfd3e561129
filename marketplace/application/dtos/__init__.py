"""Data Transfer Objects for application layer."""

from marketplace.application.dtos.business_dto import BusinessData, BusinessResponseData
from marketplace.application.dtos.user_dto import UserData, UserResponseData

__all__ = ["BusinessData", "BusinessResponseData", "UserData", "UserResponseData"]
