"""Observer: notify subscribers about events on the object they watch.

Problem:
    A text editor should write an audit log whenever a file is opened and
    send an email whenever one is saved. Making the editor call the logger
    and the mailer directly ties it to every interested party, and each new
    party means editing the editor.

Solution:
    The editor owns an ``EventManager`` (the publisher). Listeners subscribe
    to an event name and receive ``update(filename)`` when the editor
    notifies that event. Subscribers are called in the order they
    subscribed, and they can unsubscribe at any time. The editor knows only
    the listener interface.

Use cases:
    1. Changes to one object's state may require changing other objects,
       and the set of those objects is not known beforehand or changes
       dynamically.
    2. Some objects must observe others, but only for a limited time or in
       specific cases.

Pros:
    1. Open/Closed Principle: new subscribers need no change to the
       publisher.
    2. Relations between objects are established at runtime.

Cons:
    1. Subscribers are notified in subscription order, which clients must
       not rely on for unrelated listeners.
"""
import os
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger


class EventListener(ABC):
    @abstractmethod
    def update(self, filename: str) -> None:
        pass


class EventManager:
    """Publisher keeping an ordered subscriber list per event type."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[EventListener]] = {}
        self._logger = get_logger(__name__)

    def subscribe(self, event_type: str, listener: EventListener) -> None:
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(listener)
        self._logger.debug(f"Subscribed {type(listener).__name__} to {event_type}")

    def unsubscribe(self, event_type: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)
            self._logger.debug(f"Unsubscribed {type(listener).__name__} from {event_type}")

    def notify(self, event_type: str, data: str) -> None:
        listeners = self._listeners.get(event_type, [])
        if not listeners:
            self._logger.debug(f"No listeners registered for {event_type}")
            return

        for listener in list(listeners):
            listener.update(data)

    def get_registered_listeners(self) -> Dict[str, int]:
        """Get count of listeners by event type."""
        return {event_type: len(listeners) for event_type, listeners in self._listeners.items()}


class LoggingListener(EventListener):
    """Appends a line per event to a text log."""

    def __init__(self, log_path: str, message: str):
        self.log_path = log_path
        self.message = message
        self._logger = get_logger(__name__)

    def update(self, filename: str) -> None:
        text = self.message.replace("%s", filename)
        try:
            with open(self.log_path, "a", encoding="utf-8") as log_file:
                log_file.write(text + "\n")
        except OSError as e:
            self._logger.error(f"Failed to write log entry to {self.log_path}: {e}")
            return
        print(f"Writing the logs: {text}")


class EmailAlertsListener(EventListener):
    def __init__(self, email: str, message: str):
        self.email = email
        self.message = message

    def update(self, filename: str) -> None:
        print(f"Sending email to {self.email}: {self.message.replace('%s', filename)}")


class Editor:
    """Concrete publisher."""

    def __init__(self) -> None:
        self.events = EventManager()
        self.file: Optional[str] = None

    def open_file(self, path: str) -> None:
        self.file = path
        self.events.notify("open", os.path.basename(path))

    def save_file(self) -> None:
        if self.file is not None:
            self.events.notify("save", os.path.basename(self.file))


def main(log_path: str = "log.txt") -> None:
    """Open and save a file with a log listener and an email listener attached."""
    editor = Editor()

    logger = LoggingListener(log_path, "Someone has opened the file: %s")
    editor.events.subscribe("open", logger)

    email_alerts = EmailAlertsListener("admin@example.com", "Someone has changed the file: %s")
    editor.events.subscribe("save", email_alerts)

    editor.open_file("test_file.txt")
    editor.save_file()


if __name__ == "__main__":
    main()
