from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from store import crud
from store.models import Role
from utils.logger import get_logger
from views.base_menu import BaseMenu

if TYPE_CHECKING:
    from main import BookstoreApp

_logger = get_logger(__name__)


class AuthMenu(BaseMenu):
    """
    Register or log in as an admin or a user.
    A successful login opens the role's dashboard; logging out comes back here.
    """

    def __init__(self, app: "BookstoreApp", role: Role):
        super().__init__(app)
        self.role = role
        self.label = "Admin" if role == "admin" else "User"
        self.TITLE = f"{self.label} Authentication"
        self.OPTIONS = [f"Register as {self.label}", f"Login as {self.label}", "Back"]
        self.actions = {
            1: self.handle_register,
            2: self.handle_login,
            3: self.handle_back,
        }

    def _ask_credentials(self) -> Optional[Tuple[str, str]]:
        uname = self.ask_text("Username")
        pwd = self.ask_text("Password")
        if not uname or not pwd:
            self.error("Username or password cannot be empty.")
            return None
        return uname, pwd

    def handle_register(self) -> None:
        self.section(f"{self.label} Registration")
        credentials = self._ask_credentials()
        if credentials is None:
            return

        try:
            crud.register_account(*credentials, role=self.role, echo=self.echo)
        except ValueError as e:
            self.error(str(e))
            return

        if self.role == "admin":
            self.success("Admin registered successfully. Please log in.")
        else:
            self.success("Registered successfully. Please log in.")

    def handle_login(self) -> None:
        self.section(f"{self.label} Login")
        credentials = self._ask_credentials()
        if credentials is None:
            return

        account = crud.login(*credentials, role=self.role)
        if account is None:
            self.error("Incorrect credentials. Please try again.")
            return

        self.state.start_session(account)
        _logger.info(f"{self.role} {account.username} logged in")
        if self.role == "admin":
            self.success("Login successful. Welcome, Admin.")
        else:
            self.success("Login successful.")

        self.app.DASHBOARDS[self.role](self.app).run()

    def handle_back(self) -> bool:
        self.echo("Returning to main menu...")
        return True
