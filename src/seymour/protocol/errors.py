from __future__ import annotations


# ==== Parse error taxonomy (closed) ====
class ParseMessageError(ValueError):
    """Base class for every failure to decode a protocol line."""


class EmptyMessage(ParseMessageError):
    def __init__(self) -> None:
        super().__init__("empty message")


class UnknownType(ParseMessageError):
    def __init__(self, raw_token: str) -> None:
        self.raw_token = raw_token
        super().__init__(f'unknown type "{raw_token}"')


class MissingArgument(ParseMessageError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'missing argument "{name}"')


class TooManyArguments(ParseMessageError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"too many arguments (expected {expected}, got {actual})")


class InvalidIntegerArgument(ParseMessageError):
    def __init__(self, argument: str, value: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f'invalid integer value "{value}" for argument "{argument}"')
