from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Callable, Dict, List

from rich.prompt import IntPrompt, InvalidResponse, Prompt, PromptBase

from store import crud
from utils.logger import get_logger
from utils.pure import generate_menu

if TYPE_CHECKING:
    from main import BookstoreApp

_logger = get_logger(__name__)


class DecimalPrompt(PromptBase[Decimal]):
    """A prompt that returns a non-negative Decimal, e.g. a price."""

    response_type = Decimal
    validate_error_message = "[prompt.invalid]Please enter a valid price"

    def process_response(self, value: str) -> Decimal:
        try:
            price = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidResponse(self.validate_error_message)
        if not price.is_finite() or price < 0:
            raise InvalidResponse(self.validate_error_message)
        return price


class BaseMenu:
    """
    Inherited by all menus, contains the common loop:
    header, numbered options, choice, dispatch.

    Subclasses set TITLE and OPTIONS and fill `self.actions` with one handler
    per option number. A handler returning True leaves the menu.
    """

    TITLE = "Menu"
    OPTIONS: List[str] = []
    INVALID_TEXT = "Invalid option. Please try again."

    def __init__(self, app: "BookstoreApp"):
        self.app = app
        self.actions: Dict[int, Callable[[], bool | None]] = {}

    @property
    def console(self):
        return self.app.console

    @property
    def state(self):
        return self.app.state

    # output

    def echo(self, text: str) -> None:
        """Print a line exactly as given, no markup or highlighting."""
        self.console.print(text, markup=False, highlight=False)

    def success(self, text: str) -> None:
        self.console.print(text, style="green", markup=False, highlight=False)

    def error(self, text: str) -> None:
        self.console.print(text, style="bold red", markup=False, highlight=False)

    def section(self, title: str) -> None:
        self.console.print(f"\n----- {title} -----", style="bold", markup=False)

    def render(self) -> None:
        self.console.print()
        self.console.rule(f"[bold cyan]{self.TITLE}")
        for line in generate_menu(self.OPTIONS):
            self.echo(line)

    # input

    def ask_text(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console, stream=self.app.stream).strip()

    def ask_int(self, prompt: str) -> int:
        return IntPrompt.ask(prompt, console=self.console, stream=self.app.stream)

    def ask_price(self, prompt: str) -> Decimal:
        return DecimalPrompt.ask(prompt, console=self.console, stream=self.app.stream)

    def run(self) -> None:
        while True:
            self.render()
            choice = self.ask_int("Enter your choice")
            action = self.actions.get(choice)
            if action is None:
                self.error(self.INVALID_TEXT)
                continue
            if action():
                return


class DashboardMenu(BaseMenu):
    """
    Menus shown inside a login session, both roles can browse the catalog
    and log out.
    """

    def handle_list_books(self) -> None:
        self.section("Available Books")
        books = crud.list_books()
        if not books:
            self.echo("[Info] No books available.")
            return
        for book in books:
            self.echo(str(book))

    def handle_logout(self) -> bool:
        username = self.state.end_session()
        _logger.info(f"{username} logged out")
        self.echo(f"User {username} logged out.")
        self.success("Logged out successfully.")
        return True
