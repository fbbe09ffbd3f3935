"""Adherence: NotificationService depends on the MessageSender abstraction.

The sender is injected, so new channels need no change to the service and
tests can pass in a fake.
"""
from abc import ABC, abstractmethod
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class MessageSender(ABC):
    @abstractmethod
    def send_message(self, message: str) -> None: ...


class EmailSender(MessageSender):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def send_message(self, message: str) -> None:
        self._output.write(f"Sending email: {message}")


class SmsSender(MessageSender):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def send_message(self, message: str) -> None:
        self._output.write(f"Sending SMS: {message}")


class NotificationService:
    def __init__(self, message_sender: MessageSender):
        self._message_sender = message_sender

    def send_notification(self, message: str) -> None:
        self._message_sender.send_message(message)


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Good Design (Adhering to DIP) ---")

    email_service = NotificationService(EmailSender(output))
    email_service.send_notification("This is a decoupled email notification.")

    sms_service = NotificationService(SmsSender(output))
    sms_service.send_notification("This is a decoupled SMS notification.")

    output.write("-----------------------------------------")
    output.write("")
