"""Notification sinks (observer side of the catalog)."""

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class NotificationSink(Protocol):
    """Anything that can receive a text notification from the catalog."""

    def receive(self, message: str) -> None:
        ...


class Administrator:
    """A library administrator who prints every notification it receives."""

    def __init__(self, name: str) -> None:
        self.name = name

    def receive(self, message: str) -> None:
        print(f"{self.name} received notification: {message}")

    def __repr__(self) -> str:
        return f"Administrator(name={self.name!r})"


class LoggingSink:
    """Forwards notifications to a logger instead of standard output."""

    def __init__(self, name: str = "library_patterns.events", level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(name)
        self.level = level

    def receive(self, message: str) -> None:
        self.logger.log(self.level, "Catalog event: %s", message)
