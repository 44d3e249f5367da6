from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable, Dict, Optional, Type

from utils.logger import get_logger

_logger = get_logger(__name__)


class PaymentStrategy(ABC):
    """Simulated payment method. Nothing is charged, nothing can fail."""

    label: str = ""

    @abstractmethod
    def pay(self, username: str, amount: Decimal) -> str:
        """Settle `amount` for `username`, return the confirmation line."""


class _ConfirmingPayment(PaymentStrategy):
    def __init__(self, echo: Optional[Callable[[str], None]] = None):
        self.echo = echo

    def pay(self, username: str, amount: Decimal) -> str:
        _logger.info(f"Simulated {self.label} payment of {amount} by {username}")
        message = f"{username} paid ${amount:.2f} via {self.label}."
        if self.echo is not None:
            self.echo(message)
        return message


class CreditCardPayment(_ConfirmingPayment):
    label = "Credit Card"


class PaypalPayment(_ConfirmingPayment):
    label = "PayPal"


class CryptoPayment(_ConfirmingPayment):
    label = "Crypto"


# menu index -> strategy
PAYMENT_METHODS: Dict[int, Type[PaymentStrategy]] = {
    1: CreditCardPayment,
    2: PaypalPayment,
    3: CryptoPayment,
}


def get_payment_strategy(
    index: int, echo: Optional[Callable[[str], None]] = None
) -> Optional[PaymentStrategy]:
    """Strategy for a menu index, None if the index is not offered."""
    strategy_cls = PAYMENT_METHODS.get(index)
    return strategy_cls(echo) if strategy_cls else None
