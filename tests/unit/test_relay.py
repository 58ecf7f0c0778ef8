from __future__ import annotations

import asyncio

import pytest

from parley.state import RelayState
from parley.realtime import AudioRelay
from parley.providers.base import TTSOptions
from parley.errors import TTSError, StreamTimeoutError, StreamProcessingError
from tests.fakes import FakeTTSProvider, ScriptedConnection, done_message, chunk_message


async def _collect(relay: AudioRelay) -> bytes:
    out = bytearray()
    async for chunk in relay.stream():
        out.extend(chunk)
    return bytes(out)


async def _open(connection: ScriptedConnection, **kwargs: float) -> AudioRelay:
    relay = AudioRelay(FakeTTSProvider(connection), channel_max_chunks=2, **kwargs)
    await relay.open("hello", "en", "voice-1")
    return relay


@pytest.mark.asyncio
async def test_chunks_are_relayed_in_order_then_done() -> None:
    connection = ScriptedConnection(
        [chunk_message(b"A"), chunk_message(b"BB"), chunk_message(b"CCC"), done_message()]
    )
    relay = await _open(connection)

    assert await _collect(relay) == b"ABBCCC"
    assert relay.state is RelayState.DONE
    assert connection.close_calls == 1


@pytest.mark.asyncio
async def test_non_audio_messages_are_skipped() -> None:
    connection = ScriptedConnection(
        [chunk_message(b"A"), '{"type": "timestamps"}', chunk_message(b"B"), done_message()]
    )
    relay = await _open(connection)

    assert await _collect(relay) == b"AB"


@pytest.mark.asyncio
async def test_inactivity_timeout_aborts_and_closes_once() -> None:
    connection = ScriptedConnection([chunk_message(b"A")])
    relay = await _open(connection, inactivity_timeout_s=0.05)

    received: list[bytes] = []
    with pytest.raises(StreamTimeoutError):
        async for chunk in relay.stream():
            received.append(chunk)

    assert received == [b"A"]
    assert relay.state is RelayState.TIMED_OUT
    assert connection.close_calls == 1
    await relay.close()
    assert connection.close_calls == 1


@pytest.mark.asyncio
async def test_malformed_message_aborts_after_earlier_chunks() -> None:
    connection = ScriptedConnection([chunk_message(b"A"), '{"type": "chunk", "data": "%%%"}', chunk_message(b"B")])
    relay = await _open(connection)

    received: list[bytes] = []
    with pytest.raises(StreamProcessingError):
        async for chunk in relay.stream():
            received.append(chunk)

    assert received == [b"A"]
    assert relay.state is RelayState.ERRORED
    assert connection.close_calls == 1


@pytest.mark.asyncio
async def test_provider_error_message_aborts_stream() -> None:
    connection = ScriptedConnection(['{"type": "error", "error": "quota exceeded"}'])
    relay = await _open(connection)

    with pytest.raises(StreamProcessingError) as exc:
        await _collect(relay)

    assert "quota exceeded" in str(exc.value)
    assert exc.value.provider == "FakeTTS"


@pytest.mark.asyncio
async def test_connection_drop_aborts_stream() -> None:
    connection = ScriptedConnection([chunk_message(b"A"), ConnectionResetError("socket closed")])
    relay = await _open(connection)

    with pytest.raises(StreamProcessingError):
        await _collect(relay)
    assert connection.close_calls == 1


@pytest.mark.asyncio
async def test_close_failure_is_logged_not_raised() -> None:
    connection = ScriptedConnection([done_message()], close_error=RuntimeError("already closed"))
    relay = await _open(connection)

    assert await _collect(relay) == b""
    assert relay.state is RelayState.DONE
    assert connection.close_calls == 1


@pytest.mark.asyncio
async def test_consumer_going_away_closes_provider_connection() -> None:
    connection = ScriptedConnection([chunk_message(b"A"), chunk_message(b"B")])
    relay = await _open(connection)

    stream = relay.stream()
    assert await stream.__anext__() == b"A"
    await stream.aclose()

    assert relay.state is RelayState.ERRORED
    assert connection.close_calls == 1


@pytest.mark.asyncio
async def test_cancelled_consumer_closes_provider_connection() -> None:
    connection = ScriptedConnection([chunk_message(b"A")])
    relay = await _open(connection)
    first = asyncio.Event()

    async def consume() -> None:
        async for _chunk in relay.stream():
            first.set()

    task = asyncio.create_task(consume())
    await asyncio.wait_for(first.wait(), timeout=1.0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    # The shielded close may finish one loop turn after the cancellation lands.
    await asyncio.sleep(0)

    assert relay.state is RelayState.ERRORED
    assert connection.close_calls == 1


@pytest.mark.asyncio
async def test_connect_failure_surfaces_as_provider_error() -> None:
    provider = FakeTTSProvider(connect_error=OSError("dns failure"))
    relay = AudioRelay(provider)

    with pytest.raises(TTSError) as exc:
        await relay.open("hello", "en", "voice-1")

    assert exc.value.provider == "FakeTTS"
    assert relay.state is RelayState.ERRORED


@pytest.mark.asyncio
async def test_metadata_follows_requested_sample_rate() -> None:
    relay = AudioRelay(FakeTTSProvider())
    metadata = await relay.open("hello", "en", "voice-1", TTSOptions(sampleRate=22050))

    assert metadata.sample_rate == 22050
    assert metadata.format == "pcm_f32le"
    await relay.close()
