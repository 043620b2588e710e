"""
Toast notifications raised by the species dialogs.

The dialogs only emit `Notification` values through a plain callable; the
browser pages deliver them with Django's messages framework.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from django.contrib import messages


class Severity(str, Enum):
    SUCCESS = 'success'
    ERROR = 'error'


@dataclass(frozen=True)
class Notification:
    title: str
    description: Optional[str] = None
    severity: Severity = Severity.SUCCESS

    @property
    def text(self) -> str:
        if self.description:
            return f"{self.title} {self.description}"
        return self.title


Notifier = Callable[[Notification], None]

_MESSAGE_LEVELS = {
    Severity.SUCCESS: messages.SUCCESS,
    Severity.ERROR: messages.ERROR,
}


def success(title, description=None) -> Notification:
    return Notification(title=title, description=description, severity=Severity.SUCCESS)


def error(title, description=None) -> Notification:
    return Notification(title=title, description=description, severity=Severity.ERROR)


class MessagesNotifier:
    """Queue notifications on a request for the next rendered page."""

    def __init__(self, request):
        self.request = request

    def __call__(self, notification: Notification) -> None:
        messages.add_message(
            self.request,
            _MESSAGE_LEVELS[notification.severity],
            notification.text,
        )
