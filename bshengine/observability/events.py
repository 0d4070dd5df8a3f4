from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger('bshengine.observability')

# Record attributes picked up by JsonFormatter.
RECORD_FIELDS = ('api', 'method', 'url', 'status_code', 'duration_ms')


def _emit(event_name: str, payload: dict[str, Any]) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    message = {
        'event': event_name,
        **payload,
    }
    extra = {field: payload[field] for field in RECORD_FIELDS if field in payload}
    logger.debug(json.dumps(message, sort_keys=True, separators=(',', ':'), default=str), extra=extra)


def emit_request_started(*, method: str, url: str, api: str | None) -> None:
    _emit(
        'transport.request.started',
        {
            'method': method,
            'url': url,
            'api': api,
        },
    )


def emit_request_finished(*, method: str, url: str, api: str | None, status_code: int, duration_ms: int) -> None:
    _emit(
        'transport.request.finished',
        {
            'method': method,
            'url': url,
            'api': api,
            'status_code': status_code,
            'duration_ms': duration_ms,
        },
    )


def emit_token_refresh(*, outcome: str) -> None:
    _emit('auth.token_refresh', {'outcome': outcome})
