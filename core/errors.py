"""Custom errors with tracking IDs."""

from utils.timestamp import format_timestamp
from utils.ksuid import generate_ksuid


class BaseSimError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class InvalidArgumentError(BaseSimError, ValueError):
    """Malformed input, e.g. a vector that is not 3 components long."""

    def __init__(self, message, argument=None, **kwargs):
        context = kwargs.pop("context", {})
        if argument:
            context["argument"] = argument
        super().__init__(message, context=context, **kwargs)


class DivisionByZeroError(BaseSimError, ZeroDivisionError):
    """Impulse applied to a particle whose mass is zero."""

    def __init__(self, message, mass=0.0, **kwargs):
        context = kwargs.pop("context", {})
        context["mass"] = mass
        super().__init__(message, context=context, **kwargs)
