from __future__ import annotations

from bshengine.schemas.response import BshResponse


class BshError(Exception):
    """Non-2xx answer from the BSH Engine, translated from the raw HTTP response.

    ``response`` is the envelope parsed from the failure body, with its
    ``endpoint`` set to the logical path that failed.
    """

    reason_code = "http_error"

    def __init__(self, status: int, endpoint: str, response: BshResponse | None = None) -> None:
        if response is not None:
            response.endpoint = endpoint
        self.status = status
        self.endpoint = endpoint
        self.response = response
        super().__init__(self._render())

    def _render(self) -> str:
        if self.response is None:
            return f"HTTP {self.status} from {self.endpoint}"
        return self.response.model_dump_json(indent=2, exclude_none=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, endpoint={self.endpoint!r})"


class BshBadRequestError(BshError):
    reason_code = "bad_request"


class BshAuthError(BshError):
    reason_code = "auth_failed"


class BshNotFoundError(BshError):
    reason_code = "not_found"


class BshValidationError(BshError):
    reason_code = "validation_failed"

    @property
    def validations(self) -> list:
        if self.response is None or not self.response.validations:
            return []
        return list(self.response.validations)


class BshRateLimitError(BshError):
    reason_code = "rate_limited"


class BshServerError(BshError):
    reason_code = "server_error"


class BshResponseFormatError(BshError):
    """2xx response whose body is not a JSON envelope."""

    reason_code = "response_invalid"


def error_for_status(status: int, endpoint: str, response: BshResponse | None = None) -> BshError:
    if response is not None and response.validations and 400 <= status < 500:
        return BshValidationError(status, endpoint, response)
    if status == 400:
        return BshBadRequestError(status, endpoint, response)
    if status in {401, 403}:
        return BshAuthError(status, endpoint, response)
    if status == 404:
        return BshNotFoundError(status, endpoint, response)
    if status == 422:
        return BshValidationError(status, endpoint, response)
    if status == 429:
        return BshRateLimitError(status, endpoint, response)
    if status >= 500:
        return BshServerError(status, endpoint, response)
    return BshError(status, endpoint, response)
