from .routes import router
from .middleware import SecurityHeadersMiddleware
from .context import build_request_context

__all__ = ["SecurityHeadersMiddleware", "build_request_context", "router"]
