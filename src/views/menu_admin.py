from store import crud
from store.factory import create_book
from store.models import BookFormat, Category
from views.base_menu import DashboardMenu


class AdminDashboard(DashboardMenu):
    """
    Admins add books to the catalog and watch the order ledger.
    """

    TITLE = "Admin Dashboard"
    OPTIONS = ["Add Book", "List Books", "View Orders", "Logout"]

    def __init__(self, app):
        super().__init__(app)
        self.actions = {
            1: self.handle_add_book,
            2: self.handle_list_books,
            3: self.handle_view_orders,
            4: self.handle_logout,
        }

    def handle_add_book(self) -> None:
        self.section("Add New Book")

        fmt = BookFormat.parse(self.ask_text("Enter format (ebook/physical)"))
        if fmt is None:
            self.error("Invalid format. Please try again.")
            return

        category = Category.parse(
            self.ask_text("Enter category (fiction/nonfiction/science)")
        )
        if category is None:
            self.error("Invalid category. Please try again.")
            return

        title = self.ask_text("Enter title")
        author = self.ask_text("Enter author")
        if not title or not author:
            self.error("Title and author cannot be empty.")
            return

        price = self.ask_price("Enter price")
        quantity = self.ask_int("Enter quantity")
        if quantity < 0:
            self.error("Quantity cannot be negative.")
            return

        book = crud.add_book(create_book(category, title, author, price, quantity, fmt))
        self.echo(f"[Book Added] {book.title}")
        self.success("Book added successfully.")

    def handle_view_orders(self) -> None:
        self.section("Orders")
        orders = crud.list_orders()
        if not orders:
            self.echo("No orders yet.")
            return
        for order in orders:
            self.echo(str(order))
