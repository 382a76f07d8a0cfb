import asyncio
from typing import Any
from typing import Optional

from prime_time.handler import handle_connection


class FakeWriter:
    """Stands in for a StreamWriter whose peer may have gone away."""

    def __init__(self, fail_on_drain: bool = False, fail_on_eof: bool = False) -> None:
        self.written = b''
        self.eof = False
        self.closed = False
        self.waited_closed = False
        self.fail_on_drain = fail_on_drain
        self.fail_on_eof = fail_on_eof

    def get_extra_info(self, name: str, default: Optional[Any] = None) -> Any:
        if name == 'peername':
            return ('192.0.2.1', 4242)
        return default

    def write(self, data: bytes) -> None:
        self.written += data

    async def drain(self) -> None:
        if self.fail_on_drain:
            raise ConnectionResetError('peer reset')

    def can_write_eof(self) -> bool:
        return True

    def write_eof(self) -> None:
        if self.fail_on_eof:
            raise BrokenPipeError('broken pipe')
        self.eof = True

    def close(self) -> None:
        self.closed = True

    async def wait_closed(self) -> None:
        self.waited_closed = True
        if self.fail_on_drain:
            raise ConnectionResetError('peer reset')


def serve(data: bytes, writer: FakeWriter) -> FakeWriter:
    async def main() -> None:
        reader = asyncio.StreamReader()
        reader.feed_data(data)
        reader.feed_eof()
        await handle_connection(reader, writer)

    asyncio.run(main())
    return writer


def test_answers_until_eof_then_shuts_down_write_side() -> None:
    writer = serve(
        b'{"method":"isPrime","number":13}\n{"method":"isPrime","number":15}\n',
        FakeWriter(),
    )
    assert writer.written == (
        b'{"method":"isPrime","prime":true}\n'
        b'{"method":"isPrime","prime":false}\n'
    )
    assert writer.eof
    assert writer.closed


def test_clean_eof_sends_nothing() -> None:
    writer = serve(b'', FakeWriter())
    assert writer.written == b''
    assert writer.closed


def test_partial_line_at_eof_is_not_answered() -> None:
    writer = serve(b'{"method":"isPrime","number":13}', FakeWriter())
    assert writer.written == b''
    assert writer.closed


def test_violation_stops_reading() -> None:
    writer = serve(
        b'{"method":"isPrime"}\n{"method":"isPrime","number":13}\n',
        FakeWriter(),
    )
    assert writer.written == b'{"method":"invalidRequest","prime":false}\n'
    assert writer.eof
    assert writer.closed


def test_write_failure_is_contained() -> None:
    writer = serve(b'{"method":"isPrime","number":13}\n', FakeWriter(fail_on_drain=True))
    assert writer.closed
    assert writer.waited_closed
    assert not writer.eof


def test_shutdown_failure_is_contained() -> None:
    writer = serve(b'{"method":"isPrime","number":2}\n', FakeWriter(fail_on_eof=True))
    assert writer.written == b'{"method":"isPrime","prime":true}\n'
    assert writer.closed
