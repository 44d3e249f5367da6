from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from store import database
from store.models import Book, BookFormat, Category, Order, OrderStatus


def create_book(
    category: Union[Category, str],
    title: str,
    author: str,
    price: Union[Decimal, str, int],
    quantity: Optional[int] = None,
    fmt: Union[BookFormat, str] = BookFormat.PHYSICAL,
) -> Optional[Book]:
    """
    Build a Book from menu input.

    Category and format may be given as enums or as the strings typed at the
    prompt (case-insensitive). Returns None if either one is not recognized,
    the caller is expected to re-prompt.
    """
    if not isinstance(category, Category):
        category = Category.parse(category)
    if not isinstance(fmt, BookFormat):
        fmt = BookFormat.parse(fmt)
    if category is None or fmt is None:
        return None

    if quantity is None:
        quantity = database.DEFAULT_BOOK_QUANTITY

    return Book(
        title=title,
        author=author,
        price=Decimal(price),
        quantity=quantity,
        category=category,
        fmt=fmt,
    )


def create_order(
    username: str,
    book: Book,
    quantity: int,
    status: OrderStatus = OrderStatus.PLACED,
    fmt: Optional[BookFormat] = None,
    when: Optional[datetime] = None,
) -> Order:
    """New order for one title, priced at the book's current price."""
    return Order(
        order_id=str(uuid.uuid4()),
        username=username,
        placed_at=when or datetime.now(),
        price=book.price * quantity,
        quantity=quantity,
        status=status,
        title=book.title,
        fmt=fmt or book.fmt,
    )
