from __future__ import annotations


class CradlebindError(Exception):
    """Base class for all errors raised by cradlebind itself.

    Errors raised by registered targets, injectors or the container are never
    wrapped in this type; they propagate unchanged.
    """


class CradlebindTypeError(CradlebindError, TypeError):
    """An argument of the wrong type was passed to a cradlebind API."""


class NotCallableError(CradlebindTypeError):
    """Raised by `as_function`/`as_class` when the target cannot be called."""

    def __init__(self, function_name: str, expected_type: str, given_type: str) -> None:
        self.function_name = function_name
        self.expected_type = expected_type
        self.given_type = given_type
        super().__init__(f"The function {function_name} expected a {expected_type}, got {given_type}")
