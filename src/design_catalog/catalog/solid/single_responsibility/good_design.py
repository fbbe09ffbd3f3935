"""Adherence: validation, persistence and notification live in separate classes.

UserRegistrationService only orchestrates. Each collaborator can be replaced
or tested on its own.
"""
from typing import List, Optional, Tuple

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class UserValidator:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def validate(self, email: str) -> bool:
        if not email or "@" not in email:
            self._output.write("Validation failed: Invalid email address.")
            return False
        return True


class UserRepository:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)
        self._saved: List[Tuple[str, str]] = []

    def save(self, email: str, password: str) -> None:
        self._output.write(f"Database: Saving user '{email}' to the database.")
        self._saved.append((email, password))

    @property
    def saved_emails(self) -> List[str]:
        return [email for email, _ in self._saved]


class NotificationService:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def send_welcome_email(self, email: str) -> None:
        self._output.write(f"Notification: Sending a welcome email to '{email}'.")


class UserRegistrationService:
    def __init__(self, output: Optional[OutputPort] = None,
                 validator: Optional[UserValidator] = None,
                 repository: Optional[UserRepository] = None,
                 notifier: Optional[NotificationService] = None):
        self._output = resolve_output(output)
        self._validator = validator or UserValidator(self._output)
        self._repository = repository or UserRepository(self._output)
        self._notifier = notifier or NotificationService(self._output)

    def register(self, email: str, password: str) -> bool:
        if not self._validator.validate(email):
            return False
        self._repository.save(email, password)
        self._notifier.send_welcome_email(email)
        self._output.write("User registration completed successfully.")
        return True


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Good Design (Adhering to SRP) ---")
    UserRegistrationService(output).register("test@example.com", "password123")
    output.write("-----------------------------------------")
    output.write("")
