from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UserStatus = Literal["ACTIVATED", "REQUIRED_ACTIVATION", "DISABLED", "REQUIRED_RESET_PASSWORD"]


class UserProfile(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    phone: str | None = None
    picture: str | None = None
    tags: list[str] | None = None


class BshUser(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    user_id: str = Field(alias="userId")
    email: str
    roles: list[str] = Field(default_factory=list)
    status: UserStatus | None = None
    profile: UserProfile | None = None
    persistence_id: str | None = Field(default=None, alias="persistenceId")


class BshUserInit(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    password: str | None = None
    roles: list[str] | None = None
    profile: UserProfile | None = None


class UpdatePasswordPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(alias="currentPassword")
    new_password: str = Field(alias="newPassword")
