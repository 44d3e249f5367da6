from store import crud
from store.factory import create_order
from store.models import BookFormat, OrderStatus
from store.payments import get_payment_strategy
from views.base_menu import DashboardMenu


class UserDashboard(DashboardMenu):
    """
    Browse, fill the cart, pay for it, or order a single title directly.
    Every cart operation is for the user of the current session.
    """

    TITLE = "User Dashboard"
    OPTIONS = [
        "View Books",
        "Add to Cart",
        "View Cart",
        "Checkout",
        "Notifications",
        "Place Order",
        "Make Payment",
        "Logout",
    ]

    def __init__(self, app):
        super().__init__(app)
        self.actions = {
            1: self.handle_list_books,
            2: self.handle_add_to_cart,
            3: self.handle_view_cart,
            4: self.handle_checkout,
            5: self.handle_notifications,
            6: self.handle_place_order,
            7: self.handle_payment,
            8: self.handle_logout,
        }

    @property
    def username(self) -> str:
        return self.state.username

    def handle_add_to_cart(self) -> None:
        self.section("Add to Cart")
        title = self.ask_text("Book title")

        # look up first so we don't ask for a quantity of nothing
        book = crud.get_book_by_title(title)
        if book is None:
            self.error("Book not found. Cannot add to cart.")
            return

        self.echo(
            f"Book found: {book.title} by {book.author} | Price: ${book.price:.2f}"
        )
        self.echo(f"Available quantity: {book.quantity}")
        qty = self.ask_int("Quantity")

        try:
            crud.add_to_cart(self.username, book.title, qty)
        except ValueError as e:
            self.error(str(e))
            return
        self.success(f'{qty} copy/copies of "{book.title}" added to cart.')

    def handle_view_cart(self) -> None:
        self.section("Your Cart")
        self.echo(f"[Cart of {self.username}]")
        items = crud.list_cart(self.username)
        if not items:
            self.echo("Cart is empty.")
            return
        for title, qty in items:
            self.echo(f"- {title}: {qty}")
        self.echo(f"Total Cart Value: ${crud.cart_total(self.username):.2f}")

    def handle_checkout(self) -> None:
        self.section("Checkout")
        if not crud.checkout(self.username):
            self.echo("Cart is empty.")
            return
        self.success("Items checked out successfully.")

    def handle_notifications(self) -> None:
        self.section("Notifications")
        notes = crud.list_notifications(self.username)
        if not notes:
            self.echo("No notifications.")
            return
        for note in notes:
            self.echo(note)

    def handle_place_order(self) -> None:
        self.section("Place Order")
        book = crud.get_book_by_title(self.ask_text("Enter Book Title"))
        if book is None:
            self.error("Book not found.")
            return

        quantity = self.ask_int("Quantity")
        fmt = BookFormat.parse(self.ask_text("Format (ebook/physical)"))
        if fmt is None:
            self.error("Invalid format.")
            return

        crud.place_order(
            create_order(self.username, book, quantity, OrderStatus.PENDING, fmt)
        )
        self.success("Order placed successfully.")

    def handle_payment(self) -> None:
        self.section("Make Payment")
        method = self.ask_int("Choose payment method (1: Card, 2: PayPal, 3: Crypto)")
        strategy = get_payment_strategy(method, echo=self.echo)
        if strategy is None:
            self.error("Invalid payment method.")
            return

        if crud.pay(self.username, strategy) is None:
            self.echo("Cart is empty.")
