"""Business DTOs for the application layer."""

from pydantic import BaseModel, ConfigDict, Field

from marketplace.domain.entities.business import Business
from marketplace.domain.entities.user import User


class BusinessData(BaseModel):
    """DTO for a business registration request (the owner's account data)."""

    email: str = Field(..., description="Owner's email address")
    phone: str = Field(..., description="Phone number in international format")
    address: str = Field(..., description="Postal address (free text)")
    image_url: str = Field(..., description="Absolute URL of the business image")
    password: str = Field(..., description="Plain text password, hashed before use")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "owner@example.com",
                "phone": "+5521965237969",
                "address": "Rua Dominguinhos, 20",
                "image_url": "http://images.example.com/burgers.png",
                "password": "securepassword123",
            }
        }
    )


class BusinessResponseData(BaseModel):
    """DTO combining the owner account and the new business."""

    user_id: str
    business_id: str
    email: str
    phone: str
    address: str
    image_url: str
    roles: list[str]

    @classmethod
    def from_entities(cls, user: User, business: Business) -> "BusinessResponseData":
        """
        Combine the owner and the business into one response.

        Identifiers come from the business, contact data and roles from
        the owner.
        """
        return cls(
            user_id=business.user_id,
            business_id=business.business_id,
            email=user.email,
            phone=user.phone,
            address=user.address,
            image_url=user.image_url,
            roles=list(user.roles),
        )
