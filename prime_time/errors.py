class PrimeTimeError(Exception):
    pass


class InvalidRequest(PrimeTimeError, ValueError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class BindError(PrimeTimeError, OSError):
    pass
