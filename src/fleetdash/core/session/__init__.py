"""Session lifecycle: notifier, navigator and scheduler seams plus expiry handling."""

from .collaborators import (
    ConsoleNotifier,
    Navigator,
    Notifier,
    RouteNavigator,
    ScheduledCall,
    Scheduler,
    TimerScheduler,
)
from .expiry import SessionExpiryHandler, is_entry_route

__all__ = [
    "Notifier",
    "ConsoleNotifier",
    "Navigator",
    "RouteNavigator",
    "Scheduler",
    "ScheduledCall",
    "TimerScheduler",
    "SessionExpiryHandler",
    "is_entry_route",
]
