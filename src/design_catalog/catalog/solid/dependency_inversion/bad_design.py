"""Violation: NotificationService builds its own EmailSender.

The high-level service is welded to one low-level sender; adding SMS means
editing the service, and it cannot be tested with a fake sender.
"""
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class EmailSender:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def send_email(self, message: str) -> None:
        self._output.write(f"Sending email: {message}")


class NotificationService:
    def __init__(self, output: Optional[OutputPort] = None):
        # The service creates its own dependency.
        self._email_sender = EmailSender(output)

    def send_notification(self, message: str) -> None:
        self._email_sender.send_email(message)


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Bad Design (Violating DIP) ---")
    NotificationService(output).send_notification("This is a tightly coupled notification.")
    output.write("----------------------------------------")
    output.write("")
