"""
Unit tests for session expiry handling and its default collaborators.
"""

import threading
from unittest.mock import Mock

import pytest

from fleetdash.core.session import (
    ConsoleNotifier,
    RouteNavigator,
    SessionExpiryHandler,
    TimerScheduler,
    is_entry_route,
)
from fleetdash.infrastructure.storage import MemoryTokenStore


@pytest.fixture
def handler(notifier, navigator, scheduler):
    store = MemoryTokenStore()
    store.set_token("stale")
    return SessionExpiryHandler(store, notifier, navigator, scheduler)


@pytest.mark.unit
class TestIsEntryRoute:

    @pytest.mark.parametrize("path", ["/", "/login", "/admin/login", "/login?next=/cars"])
    def test_entry_routes(self, path):
        assert is_entry_route(path)

    @pytest.mark.parametrize("path", ["/dashboard", "/cars/5", "/reports", ""])
    def test_other_routes(self, path):
        assert not is_entry_route(path)


@pytest.mark.unit
class TestSessionExpiryHandler:

    def test_clears_token_warns_and_schedules(self, handler, notifier, scheduler):
        assert handler.handle_expired() is True

        assert handler.token_store.get_token() is None
        assert notifier.warnings == ["Your session has expired. Please login again."]
        assert [delay for delay, _, _ in scheduler.calls] == [2.0]
        assert handler.redirect_pending

    def test_redirect_goes_to_landing(self, handler, navigator, scheduler):
        handler.handle_expired()
        scheduler.run_pending()

        assert navigator.current_path() == "/"
        assert not handler.redirect_pending

    def test_second_expiry_while_pending_is_quiet(self, handler, notifier, scheduler):
        handler.handle_expired()

        assert handler.handle_expired() is False
        assert len(notifier.warnings) == 1
        assert len(scheduler.calls) == 1

    def test_new_redirect_after_previous_fired(self, handler, navigator, scheduler):
        handler.handle_expired()
        scheduler.run_pending()
        navigator.navigate("/cars")

        assert handler.handle_expired() is True
        assert len(scheduler.calls) == 1

    def test_entry_route_clears_token_only(self, handler, navigator, notifier, scheduler):
        navigator.navigate("/login")

        assert handler.handle_expired() is False
        assert handler.token_store.get_token() is None
        assert notifier.warnings == []
        assert scheduler.calls == []

    def test_cancel_pending(self, handler, navigator, scheduler):
        handler.handle_expired()
        handler.cancel_pending()
        scheduler.run_pending()

        assert navigator.current_path() == "/dashboard"
        assert not handler.redirect_pending

    def test_custom_delay_and_route(self, notifier, navigator, scheduler):
        handler = SessionExpiryHandler(
            MemoryTokenStore(), notifier, navigator, scheduler,
            redirect_delay=0.5, landing_route="/welcome",
        )
        handler.handle_expired()
        scheduler.run_pending()

        assert scheduler.calls == []
        assert navigator.current_path() == "/welcome"


@pytest.mark.unit
class TestDefaultCollaborators:

    def test_route_navigator_listeners(self):
        navigator = RouteNavigator("/cars")
        seen = []
        navigator.add_listener(seen.append)

        navigator.navigate("/")

        assert navigator.current_path() == "/"
        assert seen == ["/"]

    def test_console_notifier_prints(self):
        console = Mock()
        ConsoleNotifier(console).show_warning("careful")

        console.print.assert_called_once()
        assert "careful" in console.print.call_args[0][0]

    def test_timer_scheduler_runs_callback(self):
        fired = threading.Event()

        TimerScheduler().call_later(0.01, fired.set)

        assert fired.wait(2.0)

    def test_timer_scheduler_cancel(self):
        fired = threading.Event()

        handle = TimerScheduler().call_later(0.2, fired.set)
        handle.cancel()

        assert not fired.wait(0.4)
