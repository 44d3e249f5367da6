from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import store.crud as crud
from store.models import Account, Role


@dataclass
class GlobalState:
    """
    The login session, owned by the app and handed to every menu.

    Fields:
      - username: who is logged in, None between sessions
      - role: "admin" | "user" | None if nobody is logged in
    """

    username: Optional[str] = None
    role: Optional[Role] = None

    @property
    def logged_in(self) -> bool:
        return self.username is not None

    def start_session(self, account: Account) -> None:
        """Log `account` in. Users get their cart and notifications opened."""
        self.username = account.username
        self.role = account.role
        if account.role == "user":
            crud.open_cart(account.username)

    def end_session(self) -> str:
        """
        Log out and return the username that was logged in.
        Only called from a dashboard, which always runs inside a session.
        """
        if self.username is None:
            raise RuntimeError("No active session.")
        username = self.username
        self.username = None
        self.role = None
        return username
