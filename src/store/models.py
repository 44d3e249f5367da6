# provide dataclass models

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Literal, Optional

Role = Literal["admin", "user"]


class Category(Enum):
    FICTION = "Fiction"
    NONFICTION = "Non-Fiction"
    SCIENCE = "Science"

    @classmethod
    def parse(cls, value: str) -> Optional["Category"]:
        """Case-insensitive lookup from user input, None if unknown."""
        key = (value or "").strip().lower().replace("-", "")
        return {
            "fiction": cls.FICTION,
            "nonfiction": cls.NONFICTION,
            "science": cls.SCIENCE,
        }.get(key)


class BookFormat(Enum):
    EBOOK = "ebook"
    PHYSICAL = "physical"

    @classmethod
    def parse(cls, value: str) -> Optional["BookFormat"]:
        key = (value or "").strip().lower()
        for fmt in cls:
            if fmt.value == key:
                return fmt
        return None


class OrderStatus(Enum):
    PLACED = "PLACED"  # paid from the cart
    PENDING = "Pending"  # placed directly, not paid


@dataclass(frozen=True)
class Book:
    title: str
    author: str
    price: Decimal
    quantity: int
    category: Category
    fmt: BookFormat = BookFormat.PHYSICAL

    def __str__(self) -> str:
        return (
            f"[{self.category.value}] {self.title} by {self.author}"
            f" - ${self.price:.2f} | Qty: {self.quantity}"
        )


@dataclass(frozen=True)
class Account:
    username: str
    password: str
    role: Role


@dataclass(frozen=True)
class Order:
    order_id: str
    username: str
    placed_at: datetime
    price: Decimal  # line total at time of order
    quantity: int
    status: OrderStatus
    title: str
    fmt: BookFormat = BookFormat.PHYSICAL

    def __str__(self) -> str:
        return (
            f"Order by {self.username} for {self.title}"
            f" x{self.quantity} [{self.status.value}]"
        )


@dataclass(frozen=True)
class Receipt:
    total: Decimal
    orders: tuple[Order, ...]
    message: str  # what the payment strategy printed
