from dataclasses import dataclass

DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 1981
# StreamReader buffer limit; a request line longer than this is rejected.
DEFAULT_LINE_LIMIT = 1024 * 1024


@dataclass(frozen=True)
class ServerSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    line_limit: int = DEFAULT_LINE_LIMIT
    verbose: bool = False
    log_json: bool = False
