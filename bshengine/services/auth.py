from __future__ import annotations

from typing import Any

from bshengine.schemas.auth import ActivateAccountPayload, EmailPayload, LoginParams, RefreshPayload, ResetPasswordPayload
from bshengine.schemas.response import BshResponse
from bshengine.schemas.user import BshUserInit
from bshengine.services.base import BaseService, OnError, OnSuccess


class AuthService(BaseService):
    base_endpoint = "/api/auth"
    api_prefix = "auth"

    async def login(
        self,
        *,
        payload: LoginParams | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request("/login", operation="login", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def register(
        self,
        *,
        payload: BshUserInit | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request("/register", operation="register", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def refresh_token(
        self,
        *,
        payload: RefreshPayload | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request("/refresh", operation="refreshToken", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def forget_password(
        self,
        *,
        payload: EmailPayload | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/forget-password",
                operation="forgetPassword",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
            )
        )

    async def reset_password(
        self,
        *,
        payload: ResetPasswordPayload | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/reset-password",
                operation="resetPassword",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
            )
        )

    async def activate_account(
        self,
        *,
        payload: ActivateAccountPayload | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/activate-account",
                operation="activateAccount",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
            )
        )

    async def resend_activation_email(
        self,
        *,
        payload: EmailPayload | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request(
                "/resend-activation-email",
                operation="resendActivationEmail",
                payload=payload,
                on_success=on_success,
                on_error=on_error,
            )
        )
