"""Streaming audio relay state."""

from __future__ import annotations

from enum import Enum


class RelayState(str, Enum):
    CONNECTING = "connecting"
    STREAMING = "streaming"
    DONE = "done"
    ERRORED = "errored"
    TIMED_OUT = "timed_out"

    @property
    def terminal(self) -> bool:
        return self in {RelayState.DONE, RelayState.ERRORED, RelayState.TIMED_OUT}


__all__ = ["RelayState"]
