import os
import sys
import unittest
from decimal import Decimal

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from store import crud  # noqa: E402
from store import database as store_database  # noqa: E402
from store.factory import create_book, create_order  # noqa: E402
from store.models import Account, BookFormat, Category, OrderStatus  # noqa: E402
from store.payments import (  # noqa: E402
    CreditCardPayment,
    CryptoPayment,
    PaypalPayment,
    get_payment_strategy,
)
from utils.pure import generate_banner, generate_menu  # noqa: E402
from utils.state import GlobalState  # noqa: E402


class FactoryTestCase(unittest.TestCase):
    def test_create_book_display_per_category(self):
        cases = {
            "fiction": "[Fiction] Dune by Herbert - $9.99 | Qty: 5",
            "NonFiction": "[Non-Fiction] Dune by Herbert - $9.99 | Qty: 5",
            "SCIENCE": "[Science] Dune by Herbert - $9.99 | Qty: 5",
        }
        for category, expected in cases.items():
            book = create_book(category, "Dune", "Herbert", "9.99", 5, "ebook")
            self.assertEqual(str(book), expected)

    def test_format_has_no_effect(self):
        ebook = create_book(Category.SCIENCE, "Cosmos", "Sagan", "12.5", 2, "ebook")
        paper = create_book(Category.SCIENCE, "Cosmos", "Sagan", "12.5", 2, "PHYSICAL")
        self.assertEqual(ebook.fmt, BookFormat.EBOOK)
        self.assertEqual(paper.fmt, BookFormat.PHYSICAL)
        self.assertEqual(str(ebook), str(paper))
        self.assertEqual(str(ebook), "[Science] Cosmos by Sagan - $12.50 | Qty: 2")

    def test_invalid_category_or_format(self):
        self.assertIsNone(create_book("poetry", "T", "A", "1"))
        self.assertIsNone(create_book("fiction", "T", "A", "1", 1, "audiobook"))

    def test_default_quantity(self):
        book = create_book("fiction", "T", "A", "1")
        self.assertEqual(book.quantity, store_database.DEFAULT_BOOK_QUANTITY)

    def test_create_order(self):
        book = create_book("fiction", "Dune", "Herbert", "9.99", 5)
        first = create_order("bob", book, 2)
        second = create_order("bob", book, 2, OrderStatus.PENDING, BookFormat.EBOOK)

        self.assertNotEqual(first.order_id, second.order_id)
        self.assertEqual(first.price, Decimal("19.98"))
        self.assertEqual(first.fmt, BookFormat.PHYSICAL)
        self.assertEqual(second.fmt, BookFormat.EBOOK)
        self.assertEqual(str(second), "Order by bob for Dune x2 [Pending]")


class PaymentTestCase(unittest.TestCase):
    def test_strategies(self):
        amount = Decimal("19.98")
        self.assertEqual(
            CreditCardPayment().pay("bob", amount), "bob paid $19.98 via Credit Card."
        )
        self.assertEqual(PaypalPayment().pay("bob", amount), "bob paid $19.98 via PayPal.")
        self.assertEqual(CryptoPayment().pay("bob", amount), "bob paid $19.98 via Crypto.")

    def test_echo(self):
        printed = []
        strategy = get_payment_strategy(3, echo=printed.append)
        strategy.pay("bob", Decimal("5"))
        self.assertEqual(printed, ["bob paid $5.00 via Crypto."])

    def test_selection_by_index(self):
        self.assertIsInstance(get_payment_strategy(1), CreditCardPayment)
        self.assertIsInstance(get_payment_strategy(2), PaypalPayment)
        self.assertIsInstance(get_payment_strategy(3), CryptoPayment)
        self.assertIsNone(get_payment_strategy(0))
        self.assertIsNone(get_payment_strategy(4))


class StateTestCase(unittest.TestCase):
    def setUp(self):
        store_database.reset()

    def tearDown(self):
        store_database.reset()

    def test_user_session_opens_cart(self):
        state = GlobalState()
        self.assertFalse(state.logged_in)

        state.start_session(Account("bob", "pw2", "user"))
        self.assertTrue(state.logged_in)
        self.assertEqual(crud.list_cart("bob"), [])
        with store_database.connect() as db:
            self.assertIn("bob", db.carts)
            self.assertIn("bob", db.notifications)

        self.assertEqual(state.end_session(), "bob")
        self.assertIsNone(state.username)
        self.assertIsNone(state.role)

    def test_admin_session_has_no_cart(self):
        state = GlobalState()
        state.start_session(Account("alice", "pw1", "admin"))
        self.assertEqual(state.role, "admin")
        with store_database.connect() as db:
            self.assertNotIn("alice", db.carts)

    def test_logout_without_session(self):
        with self.assertRaises(RuntimeError):
            GlobalState().end_session()


class PureTestCase(unittest.TestCase):
    def test_generate_menu(self):
        self.assertEqual(generate_menu(["Admin", "User"]), ["1. Admin", "2. User"])
        self.assertEqual(generate_menu([]), [])

    def test_generate_banner(self):
        lines = generate_banner(["Hi"], width=10).split("\n")
        self.assertEqual(lines, ["=" * 10, "    Hi    ", "=" * 10])


if __name__ == "__main__":
    unittest.main()
