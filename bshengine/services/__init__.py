from bshengine.services.api_key import ApiKeyService
from bshengine.services.auth import AuthService
from bshengine.services.caching import CachingService
from bshengine.services.core import CoreEntities, CoreEntityServices
from bshengine.services.entities import EntityService
from bshengine.services.image import ImageService
from bshengine.services.mailing import MailingService
from bshengine.services.plugins import PluginService
from bshengine.services.settings import SettingsService
from bshengine.services.status import StatusService
from bshengine.services.user import UserService
from bshengine.services.utils import UtilsService

__all__ = [
    "ApiKeyService",
    "AuthService",
    "CachingService",
    "CoreEntities",
    "CoreEntityServices",
    "EntityService",
    "ImageService",
    "MailingService",
    "PluginService",
    "SettingsService",
    "StatusService",
    "UserService",
    "UtilsService",
]
