"""User DTOs for application layer using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field

from marketplace.domain.entities.user import User


class UserData(BaseModel):
    """
    DTO for a user registration request.

    Fields are plain strings on purpose: format checks belong to the User
    entity, which reports the first failing rule with a fixed reason.
    Pydantic only guarantees that every field is present and is a string.
    """

    email: str = Field(..., description="User's email address")
    phone: str = Field(..., description="Phone number in international format")
    address: str = Field(..., description="Postal address (free text)")
    image_url: str = Field(..., description="Absolute URL of the profile image")
    password: str = Field(..., description="Plain text password, hashed before use")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "phone": "+5521999999999",
                "address": "Rua Dominguinhos, 10",
                "image_url": "http://images.example.com/user.png",
                "password": "securepassword123",
            }
        }
    )


class UserResponseData(BaseModel):
    """DTO for returning a created user. Never exposes the password hash."""

    user_id: str
    email: str
    phone: str
    address: str
    image_url: str
    roles: list[str]

    @classmethod
    def from_entity(cls, user: User) -> "UserResponseData":
        """
        Convert a User entity to a response DTO.

        Args:
            user: User domain entity

        Returns:
            UserResponseData echoing the user's stored roles
        """
        return cls(
            user_id=user.user_id,
            email=user.email,
            phone=user.phone,
            address=user.address,
            image_url=user.image_url,
            roles=list(user.roles),
        )
