from .relay import RelayState
from .limits import RateLimitResult
from .request import RequestContext
from .runtime import RuntimeDeps
from .session import SessionClaims, TokenVerification
from .settings import AppSettings
from .validation import ValidationOutcome

__all__ = [
    "AppSettings",
    "RateLimitResult",
    "RelayState",
    "RequestContext",
    "RuntimeDeps",
    "SessionClaims",
    "TokenVerification",
    "ValidationOutcome",
]
