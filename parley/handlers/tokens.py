"""Stateless signed session tokens."""

from __future__ import annotations

import time
import uuid
import logging
from collections.abc import Callable

from jose import jwt

from parley.errors import ConfigurationError
from parley.config.secrets import ENV_SESSION_SECRET_KEY
from parley.state.session import SessionClaims, TokenVerification
from parley.config.session import (
    SESSION_TOKEN_ALGORITHM,
    SESSION_TOKEN_LIFETIME_S,
    SESSION_RENEWAL_THRESHOLD_S,
)

logger = logging.getLogger(__name__)

TimeFn = Callable[[], float]

# Expiry is enforced against our own clock so tests can drive it.
_DECODE_OPTIONS = {"verify_exp": False, "verify_iat": False, "verify_nbf": False}


class SessionTokenCodec:
    """Issue and verify HS256 session tokens.

    A token carries only its id, issue time and expiry; the server keeps no
    session store. Verification fails closed and never raises.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        lifetime_s: int = SESSION_TOKEN_LIFETIME_S,
        renewal_threshold_s: int = SESSION_RENEWAL_THRESHOLD_S,
        now_fn: TimeFn | None = None,
    ) -> None:
        if not secret_key:
            raise ConfigurationError(ENV_SESSION_SECRET_KEY, "environment variable is not set")
        self._secret_key = secret_key
        self.lifetime_s = int(lifetime_s)
        self.renewal_threshold_s = int(renewal_threshold_s)
        self._now = now_fn or time.time

    def issue(self) -> str:
        issued_at = int(self._now())
        claims = {
            "jti": uuid.uuid4().hex,
            "iat": issued_at,
            "exp": issued_at + self.lifetime_s,
        }
        return jwt.encode(claims, self._secret_key, algorithm=SESSION_TOKEN_ALGORITHM)

    def verify(self, token: str | None) -> TokenVerification:
        if not token:
            return TokenVerification(valid=False)
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[SESSION_TOKEN_ALGORITHM],
                options=_DECODE_OPTIONS,
            )
            claims = SessionClaims(
                token_id=str(payload.get("jti") or ""),
                issued_at=int(payload["iat"]),
                expires_at=int(payload["exp"]),
            )
            if self._now() >= claims.expires_at:
                logger.info("session token expired token_id=%s", claims.token_id)
                return TokenVerification(valid=False)
        except Exception:
            logger.debug("session token verification failed", exc_info=True)
            return TokenVerification(valid=False)
        return TokenVerification(valid=True, claims=claims)

    def should_renew(self, claims: SessionClaims) -> bool:
        return claims.remaining_s(self._now()) < self.renewal_threshold_s

    def needs_renewal(self, token: str | None) -> bool:
        result = self.verify(token)
        if not result.valid or result.claims is None:
            return True
        return self.should_renew(result.claims)


__all__ = ["SessionTokenCodec"]
