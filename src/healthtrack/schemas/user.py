from datetime import datetime

from pydantic import EmailStr, Field

from healthtrack.schemas.base import CamelModel


class UserRegister(CamelModel):
    username: str = Field(min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(min_length=6)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserRead(CamelModel):
    id: int
    username: str
    email: EmailStr
    created_at: datetime

    model_config = {"from_attributes": True}


class TokenResponse(CamelModel):
    token: str
    user: UserRead
