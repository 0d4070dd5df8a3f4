from pydantic import BaseModel, ConfigDict, Field


class LoginParams(BaseModel):
    email: str
    password: str


class AuthTokens(BaseModel):
    access: str
    refresh: str


class RefreshPayload(BaseModel):
    refresh: str


class EmailPayload(BaseModel):
    email: str


class ActivateAccountPayload(BaseModel):
    email: str
    code: str


class ResetPasswordPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    code: str
    new_password: str = Field(alias="newPassword")
