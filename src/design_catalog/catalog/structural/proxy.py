"""Proxy: a protection proxy in front of a shared folder.

Only managers get through, and the real folder is created lazily on the
first granted request.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output

AUTHORIZED_ROLE = "manager"


@dataclass(frozen=True)
class User:
    username: str
    role: str


class SharedFolder(ABC):
    @abstractmethod
    def perform_read_write_operations(self) -> bool:
        """Returns whether the operations were carried out."""


class RealSharedFolder(SharedFolder):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def perform_read_write_operations(self) -> bool:
        self._output.write("SharedFolder: Performing read/write operations on the folder.")
        return True


class SharedFolderProxy(SharedFolder):
    def __init__(self, user: User, output: Optional[OutputPort] = None):
        self._user = user
        self._output = resolve_output(output)
        self._folder: Optional[SharedFolder] = None

    @property
    def has_real_folder(self) -> bool:
        return self._folder is not None

    def perform_read_write_operations(self) -> bool:
        if self._user.role.casefold() != AUTHORIZED_ROLE:
            self._output.write(
                "SharedFolderProxy: Access denied. You do not have permission to access this folder."
            )
            return False

        if self._folder is None:
            self._folder = RealSharedFolder(self._output)
        self._output.write("SharedFolderProxy: Access granted. Forwarding request to the real folder.")
        return self._folder.perform_read_write_operations()


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Proxy Pattern Demonstration (Protection Proxy) ---")
    output.write("")

    manager = User("Jane Doe", "Manager")
    developer = User("John Smith", "Developer")

    output.write(f"Client: Executing request for user: {manager.username} ({manager.role})")
    SharedFolderProxy(manager, output).perform_read_write_operations()

    output.write("")
    output.write("--------------------------------------------------")
    output.write("")

    output.write(f"Client: Executing request for user: {developer.username} ({developer.role})")
    SharedFolderProxy(developer, output).perform_read_write_operations()

    output.write("")
    output.write("--- End of Demonstration ---")
