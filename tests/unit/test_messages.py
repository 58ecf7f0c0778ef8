from __future__ import annotations

import pytest

from parley.realtime import decode_provider_message
from tests.fakes import done_message, chunk_message


def test_chunk_payload_is_base64_decoded() -> None:
    message = decode_provider_message(chunk_message(b"\x00\x01\x02"))
    assert message.type == "chunk"
    assert message.audio == b"\x00\x01\x02"


def test_done_and_unknown_types_carry_no_audio() -> None:
    assert decode_provider_message(done_message()).type == "done"
    timestamps = decode_provider_message(b'{"type": "timestamps", "word_timestamps": {}}')
    assert timestamps.type == "timestamps"
    assert timestamps.audio is None


def test_error_message_text_is_kept() -> None:
    message = decode_provider_message('{"type": "error", "error": "voice not found"}')
    assert message.error == "voice not found"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[1, 2]",
        '{"data": "AAAA"}',
        '{"type": ""}',
        '{"type": "chunk"}',
        '{"type": "chunk", "data": 12}',
        '{"type": "chunk", "data": "***"}',
    ],
)
def test_malformed_messages_raise(raw: str) -> None:
    with pytest.raises(ValueError):
        decode_provider_message(raw)
