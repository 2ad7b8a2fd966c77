"""Server-to-client responses.

Codes: 2x acknowledge or carry data, 4x report a client-side problem,
50 reports a server-side problem.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import EmptyMessage, MissingArgument, ParseMessageError, UnknownType
from .parsing import check_arity, check_int64, extract_int, extract_str, tokenize


@dataclass(frozen=True)
class AckUser:
    id: int

    def __post_init__(self) -> None:
        check_int64("id", self.id)

    def to_line(self) -> str:
        return f"20 {self.id}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class StartSubscriptionList:
    """Followed by zero or more Subscription lines and one EndList."""

    def to_line(self) -> str:
        return "21"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class Subscription:
    id: int
    url: str

    def __post_init__(self) -> None:
        check_int64("id", self.id)

    def to_line(self) -> str:
        return f"22 {self.id} {self.url}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class StartEntryList:
    """Followed by zero or more Entry lines and one EndList."""

    def to_line(self) -> str:
        return "23"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class Entry:
    """A single unread feed entry.

    `title` is the trailing field: everything after the first " :" on the
    line, spaces and later colons included. A ":" inside a token (as in
    "http://") does not start the title. Titles are not escaped, so a title
    containing a newline cannot be sent.
    """

    id: int
    feed_id: int
    feed_url: str
    title: str
    url: str

    def __post_init__(self) -> None:
        check_int64("id", self.id)
        check_int64("feed_id", self.feed_id)

    def to_line(self) -> str:
        return f"24 {self.id} {self.feed_id} {self.feed_url} {self.url} :{self.title}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class EndList:
    """Ends either kind of list; the caller knows which one is open."""

    def to_line(self) -> str:
        return "25"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class AckSubscribe:
    def to_line(self) -> str:
        return "26"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class AckUnsubscribe:
    def to_line(self) -> str:
        return "27"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class AckMarkRead:
    def to_line(self) -> str:
        return "28"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class ResourceNotFound:
    message: str

    def to_line(self) -> str:
        return f"40 {self.message}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class BadCommand:
    message: str

    def to_line(self) -> str:
        return f"41 {self.message}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class NeedUser:
    """The command needs a selected user and none has been selected."""

    message: str

    def to_line(self) -> str:
        return f"42 {self.message}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class InternalError:
    message: str

    def to_line(self) -> str:
        return f"50 {self.message}"

    def __str__(self) -> str:
        return self.to_line()


Response = Union[
    AckUser,
    StartSubscriptionList,
    Subscription,
    StartEntryList,
    Entry,
    EndList,
    AckSubscribe,
    AckUnsubscribe,
    AckMarkRead,
    ResourceNotFound,
    BadCommand,
    NeedUser,
    InternalError,
]

RESPONSE_TYPES = (
    AckUser,
    StartSubscriptionList,
    Subscription,
    StartEntryList,
    Entry,
    EndList,
    AckSubscribe,
    AckUnsubscribe,
    AckMarkRead,
    ResourceNotFound,
    BadCommand,
    NeedUser,
    InternalError,
)


def _parse_entry(line: str) -> Entry:
    # The title delimiter is the first ':' opening a token; URLs before it
    # carry their own ':' ("http://...") mid-token.
    idx = line.find(" :")
    if idx < 0:
        raise MissingArgument("title")
    head = line[: idx + 1]
    title = line[idx + 2 :]

    # head keeps the space before ':', so it ends in an empty token.
    parts = tokenize(head)
    return Entry(
        id=extract_int(parts, "id", 1),
        feed_id=extract_int(parts, "feed_id", 2),
        feed_url=extract_str(parts, "feed_url", 3),
        url=extract_str(parts, "url", 4),
        title=title,
    )


def _parse_message(line: str, code: str) -> str:
    # Message text runs to end of line so that multi-word errors survive.
    prefix = code + " "
    if not line.startswith(prefix):
        raise MissingArgument("message")
    return line[len(prefix):]


def parse_response(line: str) -> Response:
    """Decode one server line into a Response.

    Raises a ParseMessageError subclass on any failure.
    """
    parts = tokenize(line)
    if not parts:
        raise EmptyMessage()

    code = parts[0]

    if code == "20":
        check_arity(parts, 1)
        return AckUser(id=extract_int(parts, "id", 1))

    if code == "21":
        check_arity(parts, 0)
        return StartSubscriptionList()

    if code == "22":
        check_arity(parts, 2)
        return Subscription(
            id=extract_int(parts, "id", 1),
            url=extract_str(parts, "url", 2),
        )

    if code == "23":
        check_arity(parts, 0)
        return StartEntryList()

    if code == "24":
        return _parse_entry(line)

    if code == "25":
        check_arity(parts, 0)
        return EndList()

    if code == "26":
        check_arity(parts, 0)
        return AckSubscribe()

    if code == "27":
        check_arity(parts, 0)
        return AckUnsubscribe()

    if code == "28":
        check_arity(parts, 0)
        return AckMarkRead()

    if code == "40":
        return ResourceNotFound(message=_parse_message(line, code))

    if code == "41":
        return BadCommand(message=_parse_message(line, code))

    if code == "42":
        return NeedUser(message=_parse_message(line, code))

    if code == "50":
        return InternalError(message=_parse_message(line, code))

    raise UnknownType(code)


def render_response(response: Response) -> str:
    if not isinstance(response, RESPONSE_TYPES):
        raise TypeError(f"not a response: {response!r}")
    return response.to_line()


def response_from_error(error: ParseMessageError) -> BadCommand:
    """Reply a server sends for a line it could not parse."""
    return BadCommand(message=str(error))
