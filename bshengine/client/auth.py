from __future__ import annotations

import time

import jwt

from bshengine.client.types import AuthFn, AuthToken, AuthType, TokenRefresher

AUTHORIZATION_HEADER = "Authorization"
APIKEY_HEADER = "X-BSH-APIKEY"


def auth_headers_for(token: AuthToken | None) -> dict[str, str]:
    if token is None:
        return {}
    if token.type is AuthType.JWT:
        return {AUTHORIZATION_HEADER: f"Bearer {token.token}"}
    if token.type is AuthType.APIKEY:
        return {APIKEY_HEADER: token.token}
    return {}


def jwt_is_expired(token: str, *, now: float | None = None) -> bool:
    # Opaque or malformed tokens are never considered expired.
    try:
        claims = jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except jwt.PyJWTError:
        return False
    exp = claims.get("exp")
    if exp is None:
        return False
    now_value = time.time() if now is None else now
    return now_value >= float(exp)


async def resolve_credential(auth_fn: AuthFn | None, refresher: TokenRefresher | None = None) -> AuthToken | None:
    if auth_fn is None:
        return None
    token = await auth_fn()
    if token is None or refresher is None or token.type is not AuthType.JWT:
        return token
    if not jwt_is_expired(token.token):
        return token
    refreshed = await refresher(token)
    return refreshed or token
