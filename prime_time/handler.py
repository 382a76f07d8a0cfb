import asyncio
import contextlib
from asyncio import IncompleteReadError
from asyncio import LimitOverrunError
from asyncio import StreamReader
from asyncio import StreamWriter

import structlog

from prime_time.errors import InvalidRequest
from prime_time.oracle import is_prime
from prime_time.protocol import INVALID_RESPONSE
from prime_time.protocol import METHOD_IS_PRIME
from prime_time.protocol import Response
from prime_time.protocol import parse_request

log = structlog.get_logger(__name__)


async def handle_connection(reader: StreamReader, writer: StreamWriter) -> None:
    """Serve one client until it disconnects or violates the protocol.

    Requests are answered strictly in the order they arrive. A malformed
    request gets a single invalidRequest response before the connection is
    closed. I/O failures are logged and end only this connection.
    """
    peer = writer.get_extra_info('peername')
    log.info('connection_opened', peer=peer)

    async def send(response: Response) -> None:
        writer.write(response.encode())
        await writer.drain()
        log.debug('response_sent', peer=peer, response=response._asdict())

    async def reject(reason: str) -> None:
        log.warning('invalid_request', peer=peer, reason=reason)
        await send(INVALID_RESPONSE)

    async def end_connection() -> None:
        if writer.can_write_eof():
            writer.write_eof()
        writer.close()
        await writer.wait_closed()

    try:
        while True:
            try:
                line = await reader.readuntil(separator=b'\n')
            except IncompleteReadError:
                # peer went away, possibly mid-line; nothing to answer
                break
            except LimitOverrunError:
                await reject('line exceeds buffer limit')
                break

            try:
                request = parse_request(line)
            except InvalidRequest as e:
                await reject(e.reason)
                break

            log.debug('request_received', peer=peer, request=request._asdict())
            # trial division runs off the event loop
            prime = await asyncio.get_running_loop().run_in_executor(None, is_prime, request.number)
            await send(Response(METHOD_IS_PRIME, prime))

        await end_connection()
        log.info('connection_closed', peer=peer)
    except OSError as e:
        log.error('connection_error', peer=peer, error=repr(e))
        writer.close()
        with contextlib.suppress(OSError):
            await writer.wait_closed()
