# src/store/crud.py
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from store import database, models
from store.database import connect
from store.factory import create_order
from store.payments import PaymentStrategy
from utils.logger import get_logger
from utils.messages import AccountObserver, OrderPlacedMessage

_logger = get_logger(__name__)


def _match_title(book: models.Book, title: str) -> bool:
    return book.title.lower() == (title or "").lower()


# ---------------------------
# Books (Catalog)
# ---------------------------


def add_book(book: models.Book) -> models.Book:
    """Append a book to the catalog. Titles are not required to be unique."""
    with connect() as db:
        db.books.append(book)
    _logger.info(f"Book added: {book.title}")
    return book


def list_books() -> List[models.Book]:
    with connect() as db:
        return list(db.books)


def get_book_by_title(title: str) -> Optional[models.Book]:
    """Case-insensitive exact match; the first book added with that title wins."""
    with connect() as db:
        for book in db.books:
            if _match_title(book, title):
                return book
    return None


def update_book_stock(title: str, quantity: int) -> bool:
    """
    Re-stock: replace the quantity of the first book matching `title`.
    Returns False if no such book exists.
    """
    if quantity < 0:
        raise ValueError("Quantity cannot be negative.")

    with connect() as db:
        for i, book in enumerate(db.books):
            if _match_title(book, title):
                db.books[i] = dataclasses.replace(book, quantity=quantity)
                _logger.info(f"Stock of {book.title} set to {quantity}")
                return True
    return False


# ---------------------------
# Accounts & Registration
# ---------------------------


def username_available(username: str, role: models.Role) -> bool:
    """True if nobody in the role's directory is registered as `username`."""
    with connect() as db:
        return all(a.username != username for a in db.accounts[role])


def register_account(
    username: str,
    password: str,
    role: models.Role,
    echo: Optional[Callable[[str], None]] = None,
) -> models.Account:
    """
    Create an account in the admin or user directory and subscribe it to
    order notifications.

    Duplicate usernames are accepted unless ALLOW_DUPLICATE_USERNAMES is off.
    """
    if not database.ALLOW_DUPLICATE_USERNAMES and not username_available(
        username, role
    ):
        _logger.warning(f"Rejected duplicate {role} registration: {username}")
        raise ValueError("Username already taken.")

    account = models.Account(username=username, password=password, role=role)
    with connect() as db:
        db.accounts[role].append(account)
    subscribe(AccountObserver(username, echo=echo))
    _logger.info(f"Registered {role} {username}")
    return account


def login(username: str, password: str, role: models.Role) -> Optional[models.Account]:
    """Return the first account of `role` whose credentials match; otherwise None."""
    with connect() as db:
        for account in db.accounts[role]:
            if account.username == username and account.password == password:
                return account
    _logger.debug(f"Failed {role} login for {username}")
    return None


def list_accounts(role: Optional[models.Role] = None) -> List[models.Account]:
    with connect() as db:
        if role is not None:
            return list(db.accounts[role])
        return [a for accounts in db.accounts.values() for a in accounts]


# ---------------------------
# Cart & Notifications
# ---------------------------


def open_cart(username: str) -> None:
    """Create empty cart and notification entries for `username` if missing."""
    with connect() as db:
        db.carts.setdefault(username, {})
        db.notifications.setdefault(username, [])


def _notify(username: str, text: str) -> None:
    with connect() as db:
        db.notifications.setdefault(username, []).append(text)


def add_to_cart(username: str, title: str, qty: int) -> Optional[models.Book]:
    """
    Add `qty` copies of the book titled `title` to the user's cart.

    Returns the matched book, or None (and changes nothing) if the title is
    not in the catalog. Quantities accumulate under the catalog's spelling of
    the title. Stock is not checked.
    """
    if not database.ALLOW_NON_POSITIVE_QTY and qty <= 0:
        raise ValueError("Quantity must be positive.")

    book = get_book_by_title(title)
    if book is None:
        _logger.debug(f"Add to cart: no book titled {title!r}")
        return None

    open_cart(username)
    with connect() as db:
        cart = db.carts[username]
        cart[book.title] = cart.get(book.title, 0) + qty
    _notify(username, f'Added {qty} of "{book.title}" to cart.')
    return book


def list_cart(username: str) -> List[Tuple[str, int]]:
    """(title, qty) pairs in the order they were first added."""
    with connect() as db:
        return list(db.carts.get(username, {}).items())


def clear_cart(username: str) -> None:
    with connect() as db:
        if username in db.carts:
            db.carts[username].clear()


def _priced_lines(username: str) -> List[Tuple[models.Book, int]]:
    """Cart lines resolved against the catalog's current prices."""
    lines = []
    for title, qty in list_cart(username):
        book = get_book_by_title(title)
        if book is None:
            _logger.warning(f"Cart of {username} references missing book {title!r}")
            continue
        lines.append((book, qty))
    return lines


def cart_total(username: str) -> Decimal:
    return sum(
        (book.price * qty for book, qty in _priced_lines(username)), Decimal("0")
    )


def checkout(username: str) -> int:
    """
    Close out the cart without paying. Returns the number of lines that were
    checked out, 0 if the cart was already empty. No order is created.
    """
    items = list_cart(username)
    if not items:
        return 0

    _notify(username, f"Checked out cart with {len(items)} items.")
    clear_cart(username)
    return len(items)


def pay(username: str, strategy: PaymentStrategy) -> Optional[models.Receipt]:
    """
    Pay for everything in the user's cart at current catalog prices.

    One PLACED order per cart line is appended to the ledger, after the
    strategy confirms. Returns None, touching nothing, if the cart is empty.
    """
    if not list_cart(username):
        return None

    lines = _priced_lines(username)
    total = sum((book.price * qty for book, qty in lines), Decimal("0"))
    orders = [
        create_order(username, book, qty, models.OrderStatus.PLACED)
        for book, qty in lines
    ]

    message = strategy.pay(username, total)
    _notify(username, f"Paid ${total:.2f} successfully.")

    for order in orders:
        place_order(order)

    clear_cart(username)
    return models.Receipt(total=total, orders=tuple(orders), message=message)


def list_notifications(username: str) -> List[str]:
    with connect() as db:
        return list(db.notifications.get(username, []))


# ---------------------------
# Orders (Ledger)
# ---------------------------


def subscribe(observer: Callable[[OrderPlacedMessage], None]) -> None:
    with connect() as db:
        db.observers.append(observer)


def unsubscribe(observer: Callable[[OrderPlacedMessage], None]) -> bool:
    """Stop delivering order messages to `observer`. False if it wasn't subscribed."""
    with connect() as db:
        try:
            db.observers.remove(observer)
        except ValueError:
            return False
    return True


def list_observers() -> List[Callable[[OrderPlacedMessage], None]]:
    with connect() as db:
        return list(db.observers)


def place_order(order: models.Order) -> models.Order:
    """Append to the ledger, then notify every subscriber."""
    with connect() as db:
        db.orders.append(order)
        observers = list(db.observers)

    _logger.info(f"Order placed: {order}")
    message = OrderPlacedMessage(order)
    for observer in observers:
        observer(message)
    return order


def list_orders(username: Optional[str] = None) -> List[models.Order]:
    """All orders in the order they were placed, optionally for one user only."""
    with connect() as db:
        if username is None:
            return list(db.orders)
        return [o for o in db.orders if o.username == username]
