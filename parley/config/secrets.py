"""Secrets and credentials configuration (env names only)."""

from __future__ import annotations

ENV_SESSION_SECRET_KEY = "SESSION_SECRET_KEY"

ENV_ANTHROPIC_API_KEY = "ANTHROPIC_API_KEY"
ENV_ASSEMBLYAI_API_KEY = "ASSEMBLYAI_API_KEY"
ENV_CARTESIA_API_KEY = "CARTESIA_API_KEY"

__all__ = [
    "ENV_ANTHROPIC_API_KEY",
    "ENV_ASSEMBLYAI_API_KEY",
    "ENV_CARTESIA_API_KEY",
    "ENV_SESSION_SECRET_KEY",
]
