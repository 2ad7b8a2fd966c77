"""Client-to-server commands.

Session shape (the server enforces the ordering, not this codec):

    > USER <username>
    < 20 <user_id>
    > LISTSUBSCRIPTIONS
    < 21
    < 22 <feed_id> <feed_url>
    < 25
    > LISTUNREAD
    < 23
    < 24 <entry_id> <feed_id> <feed_url> <entry_url> :<entry_title>
    < 25
    > MARKREAD <entry_id>
    < 28
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import EmptyMessage, UnknownType
from .parsing import check_arity, check_int64, extract_int, extract_str, tokenize


@dataclass(frozen=True)
class User:
    """Select the active user for the session."""

    username: str

    def to_line(self) -> str:
        return f"USER {self.username}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class ListSubscriptions:
    """List the current user's subscriptions. Requires a prior USER."""

    def to_line(self) -> str:
        return "LISTSUBSCRIPTIONS"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class Subscribe:
    """Subscribe the current user to a new feed. Requires a prior USER."""

    url: str

    def to_line(self) -> str:
        return f"SUBSCRIBE {self.url}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class Unsubscribe:
    """Unsubscribe the current user from feed `id`. Requires a prior USER."""

    id: int

    def __post_init__(self) -> None:
        check_int64("id", self.id)

    def to_line(self) -> str:
        return f"UNSUBSCRIBE {self.id}"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class ListUnread:
    """List the current user's unread entries. Requires a prior USER."""

    def to_line(self) -> str:
        return "LISTUNREAD"

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True)
class MarkRead:
    """Mark feed entry `id` as read. Requires a prior USER."""

    id: int

    def __post_init__(self) -> None:
        check_int64("id", self.id)

    def to_line(self) -> str:
        return f"MARKREAD {self.id}"

    def __str__(self) -> str:
        return self.to_line()


Command = Union[User, ListSubscriptions, Subscribe, Unsubscribe, ListUnread, MarkRead]

COMMAND_TYPES = (User, ListSubscriptions, Subscribe, Unsubscribe, ListUnread, MarkRead)


def parse_command(line: str) -> Command:
    """Decode one client line into a Command.

    Raises a ParseMessageError subclass on any failure; there is no
    best-effort result.
    """
    parts = tokenize(line)
    if not parts:
        raise EmptyMessage()

    verb = parts[0]

    if verb == "USER":
        check_arity(parts, 1)
        return User(username=extract_str(parts, "username", 1))

    if verb == "LISTSUBSCRIPTIONS":
        check_arity(parts, 0)
        return ListSubscriptions()

    if verb == "SUBSCRIBE":
        check_arity(parts, 1)
        return Subscribe(url=extract_str(parts, "url", 1))

    if verb == "UNSUBSCRIBE":
        check_arity(parts, 1)
        return Unsubscribe(id=extract_int(parts, "id", 1))

    if verb == "LISTUNREAD":
        check_arity(parts, 0)
        return ListUnread()

    if verb == "MARKREAD":
        check_arity(parts, 1)
        return MarkRead(id=extract_int(parts, "id", 1))

    raise UnknownType(verb)


def render_command(command: Command) -> str:
    if not isinstance(command, COMMAND_TYPES):
        raise TypeError(f"not a command: {command!r}")
    return command.to_line()
