"""Command-line entry point for the prime-time server."""

import asyncio

import click
import structlog

from prime_time import __version__
from prime_time.config.logging import configure_logging
from prime_time.config.settings import DEFAULT_HOST
from prime_time.config.settings import DEFAULT_LINE_LIMIT
from prime_time.config.settings import DEFAULT_PORT
from prime_time.config.settings import ServerSettings
from prime_time.errors import BindError
from prime_time.server import serve

log = structlog.get_logger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name='prime-time')
@click.option('--host', default=DEFAULT_HOST, show_default=True, envvar='PRIME_TIME_HOST', help='Address to listen on.')
@click.option(
    '--port',
    default=DEFAULT_PORT,
    show_default=True,
    envvar='PRIME_TIME_PORT',
    type=click.IntRange(0, 65535),
    help='TCP port to listen on.',
)
@click.option(
    '--line-limit',
    default=DEFAULT_LINE_LIMIT,
    show_default=True,
    envvar='PRIME_TIME_LINE_LIMIT',
    type=click.IntRange(min=1),
    help='Longest accepted request line, in bytes.',
)
@click.option('-v', '--verbose', is_flag=True, help='Log every request and response.')
@click.option('--log-json', is_flag=True, help='Structured JSON log output to stderr.')
def cli(host: str, port: int, line_limit: int, verbose: bool, log_json: bool) -> None:
    """Answer line-delimited JSON isPrime queries over TCP."""
    settings = ServerSettings(
        host=host,
        port=port,
        line_limit=line_limit,
        verbose=verbose,
        log_json=log_json,
    )
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    try:
        asyncio.run(serve(settings))
    except BindError as e:
        log.error('bind_failed', error=str(e))
        raise SystemExit(1)
    except KeyboardInterrupt:
        log.info('shutdown')


def main() -> None:
    cli()
