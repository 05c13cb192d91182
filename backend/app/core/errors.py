"""Domain errors raised by services; routers translate them to HTTP 400."""


class SleepLogError(Exception):
    """Base class for rejected input."""


class FormatError(SleepLogError):
    """Malformed time ("HH:MM"), date ("YYYY-MM-DD") or month ("YYYY-MM") string."""


class ValidationError(SleepLogError):
    """New entry breaks the alternation or chronological-order rule for its date."""

    def __init__(self, rule: str, message: str):
        super().__init__(message)
        self.rule = rule
