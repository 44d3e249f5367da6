# owns the in-memory store, provides helper methods internal to store package
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

from store import models
from utils.logger import get_logger

_logger = get_logger(__name__)

ALLOW_DUPLICATE_USERNAMES = True
ALLOW_NON_POSITIVE_QTY = True
DEFAULT_BOOK_QUANTITY = 1


@dataclass
class Database:
    """
    Process-wide bookkeeping. Nothing here survives a restart.

    Fields:
      - books: catalog in insertion order, duplicates allowed
      - accounts: role -> registered accounts, the two directories are disjoint
      - carts: username -> {title: qty}, insertion ordered
      - notifications: username -> append-only messages
      - orders: append-only ledger
      - observers: callables notified on every placed order
    """

    books: List[models.Book] = field(default_factory=list)
    accounts: Dict[str, List[models.Account]] = field(
        default_factory=lambda: {"admin": [], "user": []}
    )
    carts: Dict[str, Dict[str, int]] = field(default_factory=dict)
    notifications: Dict[str, List[str]] = field(default_factory=dict)
    orders: List[models.Order] = field(default_factory=list)
    observers: List[Callable] = field(default_factory=list)


_instance: Optional[Database] = None


def get_instance() -> Database:
    """Return the singleton store, creating it on first use."""
    global _instance
    if _instance is None:
        _logger.debug("Creating in-memory store...")
        _instance = Database()
    return _instance


def reset() -> None:
    """Drop every book, account, cart and order. Used by tests."""
    global _instance
    _instance = None


@contextmanager
def connect() -> Iterator[Database]:
    """Context manager yielding the singleton store.

    Mirrors a connection so callers scope their access the same way everywhere.
    """
    yield get_instance()
