from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from blog_cms.configs.settings import MIN_PASSWORD_LENGTH


class AdminIdentity(BaseModel):
    """The single configured administrator."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: EmailStr
    password_hash: SecretStr


class AccessClaims(BaseModel):
    """Verified claims extracted from an access token."""

    subject_id: str
    email: str
    jti: str
    issued_at: datetime
    expires_at: datetime


class TokenPair(BaseModel):
    """Access and refresh tokens issued together."""

    access_token: str
    refresh_token: str


class LoginRequest(BaseModel):
    """Login request body."""

    email: EmailStr = Field(..., examples=["admin@example.com"])
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, examples=["s3cret-passw0rd"])


class RefreshTokenRequest(BaseModel):
    """Refresh and logout request body."""

    model_config = ConfigDict(populate_by_name=True)

    refresh_token: str = Field(..., min_length=1, alias="refreshToken")


class TokenResponse(BaseModel):
    """Login and refresh response body."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    access_token: str = Field(alias="accessToken")
    refresh_token: str = Field(alias="refreshToken")
