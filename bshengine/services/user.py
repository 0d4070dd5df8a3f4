from __future__ import annotations

from typing import Any

from bshengine.client.types import FormData
from bshengine.schemas.response import BshResponse
from bshengine.schemas.search import BshSearch
from bshengine.schemas.user import BshUserInit, UpdatePasswordPayload, UserProfile
from bshengine.services.base import BaseService, OnError, OnSuccess, list_query


class UserService(BaseService):
    base_endpoint = "/api/users"
    api_prefix = "user"

    async def me(
        self,
        *,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(self._request("/me", operation="me", on_success=on_success, on_error=on_error))

    async def init(
        self,
        *,
        payload: BshUserInit | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request("/init", operation="init", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def update_profile(
        self,
        *,
        payload: UserProfile | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.put(
            self._request("/profile", operation="updateProfile", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def update_picture(
        self,
        *,
        picture: Any,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        """Upload a profile picture; ``picture`` is bytes, a file object or a
        ``(filename, content[, content_type])`` tuple."""
        form = FormData()
        form.set("picture", picture)
        return await self.client.post(
            self._request("/picture", operation="updatePicture", payload=form, on_success=on_success, on_error=on_error)
        )

    async def update_password(
        self,
        *,
        payload: UpdatePasswordPayload | dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.put(
            self._request("/password", operation="updatePassword", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def get_by_id(
        self,
        *,
        id: str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.get(self._request(f"/{id}", operation="getById", on_success=on_success, on_error=on_error))

    async def search(
        self,
        *,
        payload: BshSearch | dict[str, Any] | None = None,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.post(
            self._request("/search", operation="search", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def list(
        self,
        *,
        page: int | str | None = None,
        size: int | str | None = None,
        sort: str | None = None,
        filter: str | None = None,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        query = list_query(page=page, size=size, sort=sort, filter=filter)
        return await self.client.get(self._request(query, operation="list", on_success=on_success, on_error=on_error))

    async def update(
        self,
        *,
        payload: dict[str, Any],
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.put(
            self._request(operation="update", payload=payload, on_success=on_success, on_error=on_error)
        )

    async def delete_by_id(
        self,
        *,
        id: str,  # noqa: A002
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
    ) -> BshResponse | None:
        return await self.client.delete(
            self._request(f"/{id}", operation="deleteById", on_success=on_success, on_error=on_error)
        )
