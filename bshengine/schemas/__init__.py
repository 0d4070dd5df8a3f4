from bshengine.schemas.auth import (
    ActivateAccountPayload,
    AuthTokens,
    EmailPayload,
    LoginParams,
    RefreshPayload,
    ResetPasswordPayload,
)
from bshengine.schemas.response import BshResponse, FieldValidation, ResponseMeta, is_ok
from bshengine.schemas.search import Aggregate, BshSearch, Filter, GroupBy, Pagination, Sort
from bshengine.schemas.status import ApiKeyForm, CacheInfo, EngineStatus, HealthCheckData, ServiceStatus
from bshengine.schemas.storage import MailingPayload, UploadOptions, UploadResponse
from bshengine.schemas.user import BshUser, BshUserInit, UpdatePasswordPayload, UserProfile

__all__ = [
    "ActivateAccountPayload",
    "Aggregate",
    "ApiKeyForm",
    "AuthTokens",
    "BshResponse",
    "BshSearch",
    "BshUser",
    "BshUserInit",
    "CacheInfo",
    "EmailPayload",
    "EngineStatus",
    "FieldValidation",
    "Filter",
    "GroupBy",
    "HealthCheckData",
    "LoginParams",
    "MailingPayload",
    "Pagination",
    "RefreshPayload",
    "ResetPasswordPayload",
    "ResponseMeta",
    "ServiceStatus",
    "Sort",
    "UpdatePasswordPayload",
    "UploadOptions",
    "UploadResponse",
    "UserProfile",
    "is_ok",
]
