import sys
from typing import Optional, TextIO

from rich.console import Console

from utils.logger import get_logger
from utils.pure import generate_banner
from utils.state import GlobalState
from views.base_menu import BaseMenu
from views.menu_admin import AdminDashboard
from views.menu_auth import AuthMenu
from views.menu_user import UserDashboard

_logger = get_logger(__name__)


class RoleMenu(BaseMenu):
    TITLE = "Please select your role to continue"
    OPTIONS = ["Admin", "User", "Exit"]

    def __init__(self, app):
        super().__init__(app)
        self.actions = {
            1: lambda: AuthMenu(self.app, "admin").run(),
            2: lambda: AuthMenu(self.app, "user").run(),
            3: self.handle_exit,
        }

    def handle_exit(self) -> bool:
        self.echo("\nThank you for using FolioVerse. Goodbye!")
        return True


class BookstoreApp:
    """
    Console front end: role selection, then authentication, then the
    role's dashboard. Reads from `stream` (stdin when None) and writes to
    `console`.
    """

    DASHBOARDS = {
        "admin": AdminDashboard,
        "user": UserDashboard,
    }

    state: GlobalState

    def __init__(
        self, console: Optional[Console] = None, stream: Optional[TextIO] = None
    ):
        self.console = console or Console()
        self.stream = stream
        self.state = GlobalState()

    def run(self) -> int:
        self.console.print()
        self.console.print(
            generate_banner(
                ["Welcome to FolioVerse", "Your Online Bookstore Management"]
            ),
            style="bold",
            markup=False,
            highlight=False,
        )

        try:
            RoleMenu(self).run()
        except (EOFError, KeyboardInterrupt):
            _logger.debug("Input closed, exiting")
            self.console.print("\nGoodbye!", markup=False)
        return 0


def main() -> None:
    sys.exit(BookstoreApp().run())


if __name__ == "__main__":
    main()
