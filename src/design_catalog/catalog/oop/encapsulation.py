"""Encapsulation: a bank account that guards its balance.

The balance, account number and history are private. The only way to change
the balance is through deposit() and withdraw(), which validate every amount
and leave the account untouched when a rule is broken.
"""
import random
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from design_catalog.domain.base.ports import OutputPort
from design_catalog.domain.core.exceptions import ValidationError
from design_catalog.infrastructure.adapters.output import resolve_output
from design_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

Amount = Union[Decimal, int, str]

MAX_DEPOSIT = Decimal("10000")
MAX_WITHDRAWAL = Decimal("5000")


def _to_amount(value: Amount) -> Optional[Decimal]:
    """Convert to a finite Decimal, or None when that is not possible."""
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    return amount if amount.is_finite() else None


class BankAccount:
    """Account whose state only changes through validated operations."""

    def __init__(self, account_holder_name: str, initial_balance: Amount,
                 output: Optional[OutputPort] = None):
        if not account_holder_name or not account_holder_name.strip():
            raise ValidationError("Account holder name cannot be empty")
        converted = _to_amount(initial_balance)
        if converted is None:
            raise ValidationError("Initial balance must be a finite number", details=str(initial_balance))
        initial_balance = converted
        if initial_balance < 0:
            raise ValidationError("Initial balance cannot be negative", details=str(initial_balance))

        self._account_holder_name = account_holder_name
        self._balance = initial_balance
        self._account_number = self._generate_account_number()
        self._created_date = datetime.now()
        self._transaction_history: List[str] = []
        self._output = resolve_output(output)

        self._add_transaction(f"Account created with initial balance: ${initial_balance:.2f}")

    @property
    def account_holder_name(self) -> str:
        return self._account_holder_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def created_date(self) -> datetime:
        return self._created_date

    @property
    def transaction_history(self) -> List[str]:
        return list(self._transaction_history)

    def deposit(self, amount: Amount) -> bool:
        """Credit the account. Returns False and changes nothing on rejection."""
        converted = _to_amount(amount)
        if converted is None:
            return self._reject("Deposit amount must be a finite number")
        amount = converted
        if amount <= 0:
            return self._reject("Deposit amount must be positive")
        if amount > MAX_DEPOSIT:
            return self._reject("Single deposit cannot exceed $10,000")

        self._balance += amount
        self._add_transaction(f"Deposited: ${amount:.2f}")
        self._output.write(f"Successfully deposited ${amount:.2f}. New balance: ${self._balance:.2f}")
        return True

    def withdraw(self, amount: Amount) -> bool:
        """Debit the account. Returns False and changes nothing on rejection."""
        converted = _to_amount(amount)
        if converted is None:
            return self._reject("Withdrawal amount must be a finite number")
        amount = converted
        if amount <= 0:
            return self._reject("Withdrawal amount must be positive")
        if amount > self._balance:
            return self._reject("Insufficient funds")
        if amount > MAX_WITHDRAWAL:
            return self._reject("Single withdrawal cannot exceed $5,000")

        self._balance -= amount
        self._add_transaction(f"Withdrew: ${amount:.2f}")
        self._output.write(f"Successfully withdrew ${amount:.2f}. New balance: ${self._balance:.2f}")
        return True

    def display_transaction_history(self) -> None:
        self._output.write("")
        self._output.write("--- Transaction History ---")
        self._output.write_lines(self._transaction_history)

    def _reject(self, reason: str) -> bool:
        logger.debug("Account operation rejected", account=self._account_number, reason=reason)
        self._output.write(f"Error: {reason}")
        return False

    @staticmethod
    def _generate_account_number() -> str:
        return f"ACC{random.randint(100000, 999998)}"

    def _add_transaction(self, description: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._transaction_history.append(f"{timestamp}: {description}")


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("=== Encapsulation Demonstration ===")
    output.write("")

    account = BankAccount("John Doe", Decimal("1000.00"), output=output)

    output.write(f"Account Holder: {account.account_holder_name}")
    output.write(f"Current Balance: ${account.balance:.2f}")
    output.write(f"Account Number: {account.account_number}")
    output.write("")

    account.deposit(Decimal("500.00"))
    account.withdraw(Decimal("200.00"))

    output.write("")
    output.write("--- Testing Data Protection ---")
    account.withdraw(Decimal("2000.00"))
    account.deposit(Decimal("-100.00"))

    account.display_transaction_history()
