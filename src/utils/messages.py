from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from store.models import Order


@dataclass(frozen=True)
class OrderPlacedMessage:
    """
    Broadcast by the order ledger every time an order is appended.
    Delivered synchronously to every subscriber, in subscription order.
    """

    order: Order

    @property
    def text(self) -> str:
        return str(self.order)


@dataclass(eq=False)
class AccountObserver:
    """
    Subscriber handle owned by a registered account.

    Keeps every delivered order line in `inbox`, and echoes it as
    "[Notification] ..." when an echo callback is attached.
    """

    username: str
    echo: Optional[Callable[[str], None]] = None
    inbox: List[str] = field(default_factory=list)

    def __call__(self, message: OrderPlacedMessage) -> None:
        self.inbox.append(message.text)
        if self.echo is not None:
            self.echo(f"[Notification] {message.text}")
