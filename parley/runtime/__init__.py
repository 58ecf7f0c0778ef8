from .settings import load_settings
from .providers import ProviderRegistry
from .dependencies import build_runtime_deps
from .logging import debug_enabled, configure_logging
from .telemetry import ApiCallLogger, LogTelemetrySink, RedisTelemetrySink

__all__ = [
    "ApiCallLogger",
    "LogTelemetrySink",
    "ProviderRegistry",
    "RedisTelemetrySink",
    "build_runtime_deps",
    "configure_logging",
    "debug_enabled",
    "load_settings",
]
