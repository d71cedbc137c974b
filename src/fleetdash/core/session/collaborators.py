"""
Collaborators the client talks to when a session ends.

Notifier shows the user a message, Navigator knows the current route and
can move to another one, Scheduler runs a callback after a delay. The
defaults here suit a terminal process; UI embeddings supply their own.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from rich.console import Console

from fleetdash.constants import LANDING_ROUTE

logger = logging.getLogger(__name__)


class Notifier(ABC):
    @abstractmethod
    def show_warning(self, message: str) -> None:
        pass


class ConsoleNotifier(Notifier):
    """Prints warnings to stderr through Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def show_warning(self, message: str) -> None:
        logger.warning(message)
        self.console.print(f"[yellow]{message}[/yellow]")


class Navigator(ABC):
    @abstractmethod
    def current_path(self) -> str:
        pass

    @abstractmethod
    def navigate(self, path: str) -> None:
        pass


class RouteNavigator(Navigator):
    """In-process route holder.

    Tracks the current route and runs registered listeners on navigation,
    which is how a host application reacts to a forced return to the
    landing page.
    """

    def __init__(self, initial_path: str = LANDING_ROUTE):
        self._path = initial_path
        self._listeners: List[Callable[[str], None]] = []

    def current_path(self) -> str:
        return self._path

    def navigate(self, path: str) -> None:
        logger.info(f"Navigating from {self._path} to {path}")
        self._path = path
        for listener in list(self._listeners):
            listener(path)

    def add_listener(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)


class ScheduledCall(ABC):
    @abstractmethod
    def cancel(self) -> None:
        pass


class Scheduler(ABC):
    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        pass


class _TimerCall(ScheduledCall):
    def __init__(self, timer: threading.Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class TimerScheduler(Scheduler):
    """Runs callbacks on daemon ``threading.Timer`` threads."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return _TimerCall(timer)
