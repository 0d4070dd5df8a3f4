from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UploadOptions(BaseModel):
    model_config = ConfigDict(extra="allow")

    tags: list[str] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)


class UploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_id: str = Field(alias="fileId")
    public_id: str = Field(alias="publicId")
    asset_id: str = Field(alias="assetId")
    uri: str
    secure_uri: str = Field(alias="secureUri")
    tags: list[str] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)


class MailingPayload(BaseModel):
    to: str
    subject: str
    body: str
    html: bool = False
