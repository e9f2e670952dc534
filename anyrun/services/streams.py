"""Plumbing between a running command and the caller's streams.

Readers and writers are duck-typed so the same helpers serve asyncio
subprocess pipes and asyncssh channels: readers need `await read(n)`,
writers need `write()` and `await drain()`.
"""

import codecs
import io
import logging
from collections.abc import Callable
from typing import IO, Any

from anyrun.exceptions import StreamError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536


def fileno(stream: IO[Any] | None) -> int | None:
    """Return the OS file descriptor behind a stream, if it has one."""
    if stream is None:
        return None
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        # io.UnsupportedOperation for in-memory streams
        return None


def decode(data: bytes) -> str:
    """Decode captured output as UTF-8, replacing invalid bytes."""
    return data.decode("utf-8", errors="replace")


def read_input(stream: IO[Any], name: str = "stdin") -> bytes:
    """Read everything a caller-supplied input stream holds.

    Raises:
        StreamError: If the stream cannot be read
    """
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        raise StreamError(name, e) from e
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


async def feed(writer: Any, data: bytes | None, close: Callable[[], Any]) -> None:
    """Write data to a command's input, then signal end-of-input.

    Does nothing when the command has no input pipe.

    A command that exits without reading all of its input is not an
    error.

    Raises:
        StreamError: If writing fails for another reason
    """
    if writer is None or data is None:
        return

    try:
        if data:
            writer.write(data)
            await writer.drain()
    except (BrokenPipeError, ConnectionResetError) as e:
        logger.debug("Command closed stdin early: %s", e)
    except OSError as e:
        raise StreamError("stdin", e) from e
    finally:
        try:
            close()
        except (BrokenPipeError, ConnectionResetError):
            pass
        except OSError as e:
            logger.debug("Closing stdin failed: %s", e)


async def drain(reader: Any, sink: IO[Any] | None, name: str) -> str:
    """Read a command's output stream until end-of-file.

    Args:
        reader: Stream to read from, or None when not piped
        sink: Caller's stream to copy into, or None to capture
        name: Stream name for error messages

    Returns:
        Captured text, or "" when copied to a sink

    Raises:
        StreamError: If reading or writing fails
    """
    if reader is None:
        return ""

    chunks: list[bytes] = []
    text_sink = sink is not None and isinstance(sink, io.TextIOBase)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    try:
        while True:
            chunk = await reader.read(CHUNK_SIZE)
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            if sink is None:
                chunks.append(chunk)
            elif text_sink:
                sink.write(decoder.decode(chunk))
            else:
                sink.write(chunk)

        if sink is not None:
            if text_sink:
                sink.write(decoder.decode(b"", final=True))
            if hasattr(sink, "flush"):
                sink.flush()
    except (OSError, ValueError) as e:
        raise StreamError(name, e) from e

    return decode(b"".join(chunks))
