from __future__ import annotations

from typing import Literal, Optional

from seymour.protocol.responses import (
    EndList,
    Entry,
    Response,
    StartEntryList,
    StartSubscriptionList,
    Subscription,
)

ListKind = Literal["subscriptions", "entries"]


class FramingError(ValueError):
    pass


class ListTracker:
    """Track which list (if any) a stream of responses is inside.

    EndList is shared by both list kinds; the tracker remembers which Start
    it pairs with. One tracker per connection, fed in arrival order.
    """

    def __init__(self) -> None:
        self.open_list: Optional[ListKind] = None
        self.items = 0

    def reset(self) -> None:
        self.open_list = None
        self.items = 0

    def _open(self, kind: ListKind) -> None:
        if self.open_list is not None:
            raise FramingError(f"cannot start {kind} list inside open {self.open_list} list")
        self.open_list = kind
        self.items = 0

    def feed(self, response: Response) -> Optional[ListKind]:
        """Advance state; return the list kind closed by an EndList."""
        if isinstance(response, StartSubscriptionList):
            self._open("subscriptions")
            return None

        if isinstance(response, StartEntryList):
            self._open("entries")
            return None

        if isinstance(response, Subscription):
            if self.open_list != "subscriptions":
                raise FramingError("subscription outside a subscription list")
            self.items += 1
            return None

        if isinstance(response, Entry):
            if self.open_list != "entries":
                raise FramingError("entry outside an entry list")
            self.items += 1
            return None

        if isinstance(response, EndList):
            if self.open_list is None:
                raise FramingError("end of list with no list open")
            closed = self.open_list
            self.reset()
            return closed

        if self.open_list is not None:
            raise FramingError(f"{type(response).__name__} inside open {self.open_list} list")
        return None
