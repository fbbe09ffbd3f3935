"""Violation: one service validates, persists and notifies.

The class has three reasons to change, and none of its concerns can be
tested without the other two.
"""
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class UserService:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def register_user(self, email: str, password: str) -> bool:
        # Validation
        if not email or "@" not in email:
            self._output.write("Validation failed: Invalid email address.")
            return False

        # Persistence
        self._output.write(f"Database: Saving user '{email}' to the database.")

        # Notification
        self._output.write(f"Notification: Sending a welcome email to '{email}'.")

        self._output.write("User registration completed successfully.")
        return True


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Bad Design (Violating SRP) ---")
    UserService(output).register_user("test@example.com", "password123")
    output.write("----------------------------------------")
    output.write("")
