import asyncio

import structlog

from prime_time.config.settings import ServerSettings
from prime_time.errors import BindError
from prime_time.handler import handle_connection

log = structlog.get_logger(__name__)


async def start(settings: ServerSettings) -> asyncio.Server:
    """Bind the listening socket and begin accepting connections.

    Every accepted connection is served by ``handle_connection`` in its own
    task; the server never waits on one. Raises ``BindError`` when the
    address cannot be bound.
    """
    try:
        server = await asyncio.start_server(
            handle_connection,
            settings.host,
            settings.port,
            limit=settings.line_limit,
        )
    except OSError as e:
        raise BindError(f'cannot bind {settings.host}:{settings.port}: {e}') from e

    addr = server.sockets[0].getsockname()
    log.info('listening', host=addr[0], port=addr[1])
    return server


async def serve(settings: ServerSettings) -> None:
    server = await start(settings)

    async with server:
        await server.serve_forever()
