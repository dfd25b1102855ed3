"""Credential, session and preference models."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from society.models.transaction import Category
from society.models.preferences import Language, Theme


class Credentials(BaseModel):
    """The single stored credential record."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., alias="userName")
    password: str
    email: str


class Profile(BaseModel):
    """Remote profile row used to verify a session at startup."""

    username: str
    email: Optional[str] = None


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field("", alias="userName")
    password: str = ""
    email: str = ""


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field("", alias="userName")
    password: str = ""


class ResetRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field("", alias="userName")
    password: str = ""
    confirm_password: str = Field("", alias="confirmPassword")


class SessionResponse(BaseModel):
    username: Optional[str] = None
    authenticated: bool
    has_credentials: bool


class PreferencesResponse(BaseModel):
    language: Language
    theme: Theme


class PreferencesUpdate(BaseModel):
    language: Optional[Language] = None
    theme: Optional[Theme] = None


class Scheme(BaseModel):
    """Catalog entry offered as a suggestion on the receipt form."""

    name: str
    price: float
    category: Category
    code: str
