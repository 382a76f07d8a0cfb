import json
from typing import Any
from typing import NamedTuple
from typing import Union

from prime_time.errors import InvalidRequest

METHOD_IS_PRIME = 'isPrime'
METHOD_INVALID = 'invalidRequest'


class Request(NamedTuple):
    method: str
    number: Union[int, float]


class Response(NamedTuple):
    method: str
    prime: bool

    def encode(self) -> bytes:
        return json.dumps(
            {'method': self.method, 'prime': self.prime},
            separators=(',', ':'),
        ).encode('utf-8') + b'\n'


INVALID_RESPONSE = Response(METHOD_INVALID, False)


# Integer literals longer than this are past exact double range; they decode as
# floats (finite above 2**53, or inf) instead of ints.
MAX_INT_DIGITS = 17


def _parse_int(literal: str) -> Union[int, float]:
    if len(literal.lstrip('-')) > MAX_INT_DIGITS:
        return float(literal)
    return int(literal)


def _reject_constant(constant: str) -> Any:
    raise InvalidRequest(f'{constant} is not a JSON number')


def parse_request(line: bytes) -> Request:
    try:
        request = json.loads(
            line.decode('utf-8'),
            parse_int=_parse_int,
            parse_constant=_reject_constant,
        )
    except UnicodeDecodeError:
        raise InvalidRequest('line is not valid UTF-8')
    except json.JSONDecodeError as e:
        raise InvalidRequest(f'malformed JSON: {e.msg}')
    except RecursionError:
        raise InvalidRequest('JSON nested too deeply')

    if not isinstance(request, dict):
        raise InvalidRequest('request is not a JSON object')

    method = request.get('method', None)
    if not isinstance(method, str):
        raise InvalidRequest('missing or non-string method')

    number = request.get('number', None)
    # In python, booleans are instanceof int for historical reasons.
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise InvalidRequest('missing or non-numeric number')

    if method != METHOD_IS_PRIME:
        raise InvalidRequest(f'unknown method {method!r}')

    return Request(method, number)
