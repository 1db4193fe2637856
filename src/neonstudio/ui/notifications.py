"""Notification surfaces for transient success and error messages.

Handlers report outcomes through a :class:`Notifier` instead of returning
message strings, so the same handler code drives both the Gradio page (toasts)
and the JSON API (messages collected into the response).
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Literal

import gradio as gr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """A single message shown to the operator."""

    level: Literal["success", "error"]
    message: str


class Notifier(ABC):
    """Fire-and-forget notification surface."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a success message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error message."""


class GradioNotifier(Notifier):
    """Shows notifications as Gradio toasts.

    ``gr.Warning`` is used for errors rather than raising ``gr.Error`` so the
    handler can still return the updated state.
    """

    def success(self, message: str) -> None:
        gr.Info(message)

    def error(self, message: str) -> None:
        gr.Warning(message)


@dataclass
class CollectingNotifier(Notifier):
    """Records notifications in order so they can be returned to API clients."""

    notifications: list[Notification] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.notifications.append(Notification("success", message))

    def error(self, message: str) -> None:
        self.notifications.append(Notification("error", message))

    @property
    def errors(self) -> list[str]:
        """Error messages recorded so far."""
        return [n.message for n in self.notifications if n.level == "error"]

    @property
    def successes(self) -> list[str]:
        """Success messages recorded so far."""
        return [n.message for n in self.notifications if n.level == "success"]
