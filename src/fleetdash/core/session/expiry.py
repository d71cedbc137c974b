"""
Session expiry handling.

Runs the side effects of a rejected credential: drop the stored token, tell
the user, and send them back to the landing route after a short delay.
"""

import logging
import threading
from typing import Optional

from fleetdash.constants import (
    LANDING_ROUTE,
    LOGIN_ROUTE_MARKER,
    SESSION_REDIRECT_DELAY_SECONDS,
)
from fleetdash.exceptions.templates import ErrorMessageTemplates
from fleetdash.infrastructure.storage import TokenStore

from .collaborators import Navigator, Notifier, ScheduledCall, Scheduler

logger = logging.getLogger(__name__)


def is_entry_route(path: str) -> bool:
    """True for the login screen or the landing route."""
    return LOGIN_ROUTE_MARKER in path or path == LANDING_ROUTE


class SessionExpiryHandler:
    """Clears the token and schedules at most one redirect at a time."""

    def __init__(
        self,
        token_store: TokenStore,
        notifier: Notifier,
        navigator: Navigator,
        scheduler: Scheduler,
        redirect_delay: float = SESSION_REDIRECT_DELAY_SECONDS,
        landing_route: str = LANDING_ROUTE,
    ):
        self.token_store = token_store
        self.notifier = notifier
        self.navigator = navigator
        self.scheduler = scheduler
        self.redirect_delay = redirect_delay
        self.landing_route = landing_route
        self._pending: Optional[ScheduledCall] = None
        self._lock = threading.Lock()

    @property
    def redirect_pending(self) -> bool:
        return self._pending is not None

    def handle_expired(self) -> bool:
        """Run the expiry side effects.

        Returns True when a redirect was scheduled by this call.
        """
        self.token_store.remove_token()

        current = self.navigator.current_path()
        if is_entry_route(current):
            logger.debug(f"Session rejected on entry route {current}, no redirect")
            return False

        with self._lock:
            if self._pending is not None:
                logger.debug("Redirect to landing route already pending")
                return False
            self.notifier.show_warning(ErrorMessageTemplates.SESSION_EXPIRED)
            self._pending = self.scheduler.call_later(self.redirect_delay, self._redirect)
        logger.info(f"Session expired, redirecting to {self.landing_route} in {self.redirect_delay}s")
        return True

    def _redirect(self) -> None:
        with self._lock:
            self._pending = None
        self.navigator.navigate(self.landing_route)

    def cancel_pending(self) -> None:
        with self._lock:
            pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()
