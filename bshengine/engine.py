from __future__ import annotations

import logging

from bshengine.client.bsh_client import BshClient
from bshengine.client.errors import BshError
from bshengine.client.transport import build_httpx_transport, httpx_transport
from bshengine.client.types import (
    AuthFn,
    AuthToken,
    AuthType,
    ErrorInterceptor,
    Interceptors,
    PostInterceptor,
    PreInterceptor,
    RefreshTokenFn,
    TokenRefresher,
    TransportFn,
)
from bshengine.core.config import Settings, get_settings
from bshengine.observability.events import emit_token_refresh
from bshengine.schemas.auth import RefreshPayload
from bshengine.services import (
    ApiKeyService,
    AuthService,
    CachingService,
    CoreEntityServices,
    EntityService,
    ImageService,
    MailingService,
    PluginService,
    SettingsService,
    StatusService,
    UserService,
    UtilsService,
)

logger = logging.getLogger("bshengine.engine")


def static_auth(token: AuthToken) -> AuthFn:
    async def auth_fn() -> AuthToken | None:
        return token

    return auth_fn


def static_refresh_token(refresh_token: str) -> RefreshTokenFn:
    async def refresh_token_fn() -> str | None:
        return refresh_token

    return refresh_token_fn


class BshEngine:
    """Entry point: holds connection configuration and hands out services.

    Configuration is expected to be set up before calls are issued
    concurrently; the ``with_*``/``add_*`` methods do no locking. Every service
    access builds a fresh :class:`BshClient` from the current configuration.
    """

    def __init__(
        self,
        *,
        host: str | None = None,
        api_key: str | None = None,
        jwt_token: str | None = None,
        refresh_token: str | None = None,
        transport: TransportFn | None = None,
        auth_fn: AuthFn | None = None,
        refresh_token_fn: RefreshTokenFn | None = None,
        pre_interceptors: list[PreInterceptor] | None = None,
        post_interceptors: list[PostInterceptor] | None = None,
        error_interceptors: list[ErrorInterceptor] | None = None,
    ) -> None:
        self.host = host or ""
        self._transport = transport or httpx_transport
        self._auth_fn = auth_fn
        if self._auth_fn is None and jwt_token:
            self._auth_fn = static_auth(AuthToken(AuthType.JWT, jwt_token))
        elif self._auth_fn is None and api_key:
            self._auth_fn = static_auth(AuthToken(AuthType.APIKEY, api_key))
        self._refresh_token_fn = refresh_token_fn
        if self._refresh_token_fn is None and refresh_token:
            self._refresh_token_fn = static_refresh_token(refresh_token)
        self._pre_interceptors = list(pre_interceptors or [])
        self._post_interceptors = list(post_interceptors or [])
        self._error_interceptors = list(error_interceptors or [])

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> BshEngine:
        settings = settings or get_settings()
        return cls(
            host=settings.host,
            api_key=settings.api_key or None,
            jwt_token=settings.jwt_token or None,
            refresh_token=settings.refresh_token or None,
            transport=build_httpx_transport(timeout_seconds=settings.timeout_seconds),
        )

    def with_transport(self, transport: TransportFn) -> BshEngine:
        self._transport = transport
        return self

    def with_auth(self, auth_fn: AuthFn) -> BshEngine:
        self._auth_fn = auth_fn
        return self

    def with_refresh_token(self, refresh_token_fn: RefreshTokenFn) -> BshEngine:
        self._refresh_token_fn = refresh_token_fn
        return self

    def add_pre_interceptor(self, interceptor: PreInterceptor) -> BshEngine:
        self._pre_interceptors.append(interceptor)
        return self

    def add_post_interceptor(self, interceptor: PostInterceptor) -> BshEngine:
        self._post_interceptors.append(interceptor)
        return self

    def add_error_interceptor(self, interceptor: ErrorInterceptor) -> BshEngine:
        self._error_interceptors.append(interceptor)
        return self

    @property
    def pre_interceptors(self) -> list[PreInterceptor]:
        return list(self._pre_interceptors)

    @property
    def post_interceptors(self) -> list[PostInterceptor]:
        return list(self._post_interceptors)

    @property
    def error_interceptors(self) -> list[ErrorInterceptor]:
        return list(self._error_interceptors)

    @property
    def client(self) -> BshClient:
        return BshClient(
            self.host,
            self._transport,
            self._auth_fn,
            self._refresh_token_fn,
            interceptors=Interceptors(
                pre=list(self._pre_interceptors),
                post=list(self._post_interceptors),
                error=list(self._error_interceptors),
            ),
            token_refresher=self._token_refresher(),
        )

    def _token_refresher(self) -> TokenRefresher | None:
        if self._refresh_token_fn is None:
            return None
        refresh_token_fn = self._refresh_token_fn
        # Refresh calls go out unauthenticated so an expired token cannot recurse.
        auth_service = AuthService(BshClient(self.host, self._transport))

        async def refresher(expired: AuthToken) -> AuthToken | None:  # noqa: ARG001
            refresh_token = await refresh_token_fn()
            if not refresh_token:
                emit_token_refresh(outcome="no_refresh_token")
                return None
            failures: list[BshError] = []
            response = await auth_service.refresh_token(
                payload=RefreshPayload(refresh=refresh_token),
                on_error=failures.append,
            )
            if failures:
                logger.warning(
                    "Token refresh rejected with status %s",
                    failures[0].status,
                    extra={"api": "auth.refreshToken", "status_code": failures[0].status},
                )
                emit_token_refresh(outcome="rejected")
                return None
            first = response.data[0] if response is not None and response.data else None
            access = first.get("access") if isinstance(first, dict) else None
            if not access:
                emit_token_refresh(outcome="missing_access_token")
                return None
            emit_token_refresh(outcome="refreshed")
            return AuthToken(AuthType.JWT, access)

        return refresher

    def entity(self, name: str) -> EntityService:
        return EntityService(self.client, name)

    @property
    def core(self) -> CoreEntityServices:
        return CoreEntityServices(self.client)

    @property
    def auth(self) -> AuthService:
        return AuthService(self.client)

    @property
    def user(self) -> UserService:
        return UserService(self.client)

    @property
    def settings(self) -> SettingsService:
        return SettingsService(self.client)

    @property
    def image(self) -> ImageService:
        return ImageService(self.client)

    @property
    def mailing(self) -> MailingService:
        return MailingService(self.client)

    @property
    def caching(self) -> CachingService:
        return CachingService(self.client)

    @property
    def api_key(self) -> ApiKeyService:
        return ApiKeyService(self.client)

    @property
    def plugins(self) -> PluginService:
        return PluginService(self.client)

    @property
    def status(self) -> StatusService:
        return StatusService(self.client)

    @property
    def utils(self) -> UtilsService:
        return UtilsService(self.client)
