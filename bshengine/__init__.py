from bshengine.client import (
    AuthToken,
    AuthType,
    BshClient,
    BshError,
    ClientRequest,
    FormData,
    RequestOptions,
    build_httpx_transport,
)
from bshengine.core.config import Settings, get_settings
from bshengine.core.logging_config import configure_logging
from bshengine.engine import BshEngine
from bshengine.schemas import BshResponse, BshSearch, is_ok
from bshengine.services import CoreEntities

__version__ = "0.1.0"

__all__ = [
    "AuthToken",
    "AuthType",
    "BshClient",
    "BshEngine",
    "BshError",
    "BshResponse",
    "BshSearch",
    "ClientRequest",
    "CoreEntities",
    "FormData",
    "RequestOptions",
    "Settings",
    "build_httpx_transport",
    "configure_logging",
    "get_settings",
    "is_ok",
]
