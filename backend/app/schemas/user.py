from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, Field
from pydantic.alias_generators import to_camel

def check_email(value: str) -> str:
    """Reject malformed addresses but keep the caller's spelling, domain case included"""
    validate_email(value, check_deliverability=False)
    return value

Email = Annotated[str, AfterValidator(check_email)]

class CamelModel(BaseModel):
    """Serializes as camelCase and accepts either camelCase or snake_case input"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class UserCreate(CamelModel):
    email: Email
    password: str = Field(..., min_length=6, max_length=72)

class UserLogin(CamelModel):
    email: Email
    password: str

class UserResponse(CamelModel):
    id: int
    email: str

class AuthResponse(CamelModel):
    access_token: str
    refresh_token: str
    user: UserResponse

class RefreshTokenRequest(CamelModel):
    refresh_token: str

class AccessTokenResponse(CamelModel):
    access_token: str
