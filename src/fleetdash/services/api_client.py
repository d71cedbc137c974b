"""
Dashboard API client.

DashboardClient is the single path from the application to the backend.
It resolves configuration on first use, attaches the bearer token, applies
the request timeout and turns every failure into an ApiError subclass.
The endpoint methods are thin wrappers that fix the path, the method and
the body for each backend route.
"""

import json
import socket
import threading
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import quote, urlencode

import requests
import urllib3

from fleetdash.constants import JSON_CONTENT_TYPE, MS_PER_SECOND
from fleetdash.core.config import ApiConfig, ConfigManager
from fleetdash.core.session import (
    ConsoleNotifier,
    Navigator,
    Notifier,
    RouteNavigator,
    Scheduler,
    SessionExpiryHandler,
    TimerScheduler,
)
from fleetdash.exceptions import (
    ApiError,
    AuthenticationError,
    HttpError,
    NetworkError,
    RequestTimeoutError,
    ValidationError,
)
from fleetdash.exceptions.templates import ErrorMessageTemplates
from fleetdash.infrastructure.http import AuthenticatedHttpClient, BearerTokenAuth
from fleetdash.infrastructure.storage import FileTokenStore, TokenStore
from fleetdash.logging import ClientLogger, get_logger
from fleetdash.models import DateRange

ConfigLoader = Callable[[], Any]
DateRangeLike = Union[DateRange, Mapping[str, Any], None]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]) -> str:
    """Encode query parameters, skipping ``None`` values."""
    if not params:
        return ""
    items = params.items() if isinstance(params, Mapping) else params
    pairs = [(str(k), _query_value(v)) for k, v in items if v is not None]
    return urlencode(pairs)


def with_query(path: str, params: Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]) -> str:
    """Append ``?query`` to path only when there is something to append."""
    query = build_query(params)
    return f"{path}?{query}" if query else path


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _is_timeout(error: BaseException) -> bool:
    """True when a transport failure comes from a connect or read timeout.

    A read timeout that fires while the body downloads reaches us as
    ``requests.ConnectionError`` wrapping urllib3's ``ReadTimeoutError``,
    so the whole chain is searched, not just the outer type.
    """
    seen = set()
    pending = [error]
    while pending:
        current = pending.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, (requests.Timeout, urllib3.exceptions.TimeoutError, socket.timeout)):
            return True
        linked = [*current.args, getattr(current, "reason", None), current.__cause__, current.__context__]
        pending.extend(item for item in linked if isinstance(item, BaseException))
    return False


class DashboardClient:
    """Client for the vehicle inventory and maintenance dashboard backend.

    Construct one per application and share it; it owns the HTTP session,
    the memoized configuration and the session expiry handler.

    Args:
        config: Backend settings. When omitted, ``config_loader`` is called
            on the first request and its result is kept for the lifetime
            of the client.
        config_loader: Callable returning an ApiConfig (or an object with an
            ``api`` attribute holding one).
        token_store: Where the bearer token lives. Defaults to the file
            resolved by ``ConfigManager.token_file()``, read on first use.
        notifier, navigator, scheduler: Session expiry collaborators.
        session: Optional ``requests.Session`` to send requests through.
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        config_loader: Optional[ConfigLoader] = None,
        token_store: Optional[TokenStore] = None,
        notifier: Optional[Notifier] = None,
        navigator: Optional[Navigator] = None,
        scheduler: Optional[Scheduler] = None,
        session: Optional[requests.Session] = None,
    ):
        default_manager = ConfigManager()
        self._api_config = config
        self._config_loader = config_loader or (lambda: default_manager.load_config().api)
        self._config_lock = threading.Lock()
        self._token_store = token_store or FileTokenStore(default_manager.token_file)
        self._session = session
        self._http: Optional[AuthenticatedHttpClient] = None
        self.session_handler = SessionExpiryHandler(
            self._token_store,
            notifier or ConsoleNotifier(),
            navigator or RouteNavigator(),
            scheduler or TimerScheduler(),
        )

    @classmethod
    def from_config_manager(cls, config_manager: ConfigManager, **kwargs) -> "DashboardClient":
        """Client whose config and token file come from a ConfigManager."""
        kwargs.setdefault("token_store", FileTokenStore(config_manager.token_file))
        return cls(config_loader=lambda: config_manager.load_config().api, **kwargs)

    # -- configuration -------------------------------------------------

    def get_api_config(self) -> ApiConfig:
        """Resolve the backend settings, loading them once."""
        if self._api_config is None:
            with self._config_lock:
                if self._api_config is None:
                    loaded = self._config_loader()
                    self._api_config = getattr(loaded, "api", loaded)
        return self._api_config

    def _get_http_client(self) -> AuthenticatedHttpClient:
        if self._http is None:
            config = self.get_api_config()
            with self._config_lock:
                if self._http is None:
                    self._http = AuthenticatedHttpClient(
                        config.base_url,
                        auth_handler=BearerTokenAuth(self._token_store),
                        session=self._session,
                        timeout=config.timeout_seconds,
                    )
        return self._http

    # -- token ---------------------------------------------------------

    def get_token(self) -> Optional[str]:
        return self._token_store.get_token()

    def set_token(self, token: str) -> None:
        self._token_store.set_token(token)

    def remove_token(self) -> None:
        self._token_store.remove_token()

    # -- request pipeline ----------------------------------------------

    def make_request(
        self,
        endpoint: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        timeout: Optional[int] = None,
    ) -> Any:
        """Send a request to ``base_url + endpoint`` and decode the answer.

        Args:
            endpoint: Path starting with ``/``, query string included
            method: HTTP method
            headers: Extra headers, merged over the defaults per key
            body: JSON-serializable payload, or an already encoded str/bytes
            timeout: Per-call timeout in milliseconds

        Returns:
            The decoded JSON body, or None when the response is not JSON.

        Raises:
            RequestTimeoutError: no response within the timeout
            AuthenticationError: 401/403, after session expiry handling
            ValidationError: 400
            HttpError: any other non-2xx status
            NetworkError: the request never got a response
        """
        config = self.get_api_config()
        http = self._get_http_client()
        log = get_logger(__name__).with_context(method=method, endpoint=endpoint)

        request_headers = {"Content-Type": JSON_CONTENT_TYPE}
        request_headers.update(headers or {})
        timeout_ms = timeout if timeout is not None else config.timeout

        data = body
        if body is not None and not isinstance(body, (str, bytes)):
            data = json.dumps(body)

        try:
            response = http.request(
                method,
                endpoint,
                headers=request_headers,
                data=data,
                timeout=timeout_ms / MS_PER_SECOND,
            )
        except requests.RequestException as e:
            if _is_timeout(e):
                log.warning(f"{method} {endpoint} timed out after {timeout_ms} ms")
                raise RequestTimeoutError(endpoint, timeout_ms) from e
            log.error(f"{method} {endpoint} failed: {e}")
            raise NetworkError(endpoint, str(e), config.base_url) from e

        return self._handle_response(response, endpoint, log)

    def _handle_response(self, response: requests.Response, endpoint: str, log: ClientLogger) -> Any:
        status = response.status_code
        log.debug(f"{endpoint} -> {status}", status=status)

        if not 200 <= status < 300:
            error_data = self._parse_error_body(response, log)
            message = error_data.get("message")
            if not isinstance(message, str):
                message = None

            if status in (401, 403):
                self.session_handler.handle_expired()
                raise AuthenticationError(message, endpoint, status, error_data)

            if status == 400:
                raise ValidationError(message, endpoint, error_data)

            raise HttpError.from_status(status, response.reason, endpoint, error_data)

        content_type = (response.headers.get("Content-Type") or "").lower()
        if JSON_CONTENT_TYPE not in content_type:
            return None

        try:
            return response.json()
        except ValueError as e:
            log.error(f"Invalid JSON body in {status} response", status=status)
            raise HttpError(
                ErrorMessageTemplates.INVALID_JSON_BODY.format(endpoint=endpoint),
                endpoint=endpoint,
                status_code=status,
            ) from e

    @staticmethod
    def _parse_error_body(response: requests.Response, log: ClientLogger) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            log.error(f"Failed to parse error response: {e}", status=response.status_code)
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def close(self) -> None:
        """Release the HTTP session and drop any pending redirect."""
        self.session_handler.cancel_pending()
        if self._http is not None:
            self._http.close()
        elif self._session is not None:
            self._session.close()

    def __enter__(self) -> "DashboardClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # -- authentication ------------------------------------------------

    def login(self, credentials: Mapping[str, Any]) -> Any:
        """POST credentials; a ``token`` in the answer becomes the session token."""
        response = self.make_request("/auth/login", method="POST", body=dict(credentials))
        if isinstance(response, dict) and response.get("token"):
            self.set_token(response["token"])
        return response

    def logout(self) -> None:
        """Tell the backend, then drop the local token whatever it said."""
        try:
            self.make_request("/auth/logout", method="POST")
        except ApiError as e:
            get_logger(__name__).error(f"Logout error: {e}", error_kind=e.kind.value)
        finally:
            self.remove_token()

    # -- dashboard -----------------------------------------------------

    def get_dashboard_summary(self) -> Any:
        return self.make_request("/dashboard/summary")

    def get_top_sold_models(self) -> Any:
        return self.make_request("/dashboard/top-sold-models")

    # -- cars ----------------------------------------------------------

    def get_cars(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.make_request(with_query("/cars", params))

    def get_car(self, car_id: Any) -> Any:
        return self.make_request(f"/cars/{_segment(car_id)}")

    def create_car(self, car_data: Mapping[str, Any]) -> Any:
        return self.make_request("/cars", method="POST", body=dict(car_data))

    def update_car(self, car_id: Any, car_data: Mapping[str, Any]) -> Any:
        return self.make_request(f"/cars/{_segment(car_id)}", method="PUT", body=dict(car_data))

    def delete_car(self, car_id: Any) -> Any:
        return self.make_request(f"/cars/{_segment(car_id)}", method="DELETE")

    # -- maintenance ---------------------------------------------------

    def get_maintenance_records(self, car_id: Any) -> Any:
        """Maintenance history of one car."""
        return self.make_request(f"/maintenance/car/{_segment(car_id)}")

    def get_all_maintenance_records(self) -> Any:
        return self.make_request("/maintenance")

    def get_maintenance_record(self, record_id: Any) -> Any:
        return self.make_request(f"/maintenance/{_segment(record_id)}")

    def create_maintenance_record(self, maintenance_data: Mapping[str, Any]) -> Any:
        return self.make_request("/maintenance", method="POST", body=dict(maintenance_data))

    def update_maintenance_record(self, record_id: Any, maintenance_data: Mapping[str, Any]) -> Any:
        return self.make_request(
            f"/maintenance/{_segment(record_id)}", method="PUT", body=dict(maintenance_data)
        )

    def delete_maintenance_record(self, record_id: Any) -> Any:
        return self.make_request(f"/maintenance/{_segment(record_id)}", method="DELETE")

    def get_maintenance_categories(self) -> Any:
        return self.make_request("/maintenance/categories")

    # -- reports -------------------------------------------------------

    def _get_report(self, kind: str, date_range: DateRangeLike) -> Any:
        params = DateRange.from_value(date_range).to_params()
        return self.make_request(with_query(f"/reports/{kind}", params))

    def get_inventory_report(self, date_range: DateRangeLike = None) -> Any:
        return self._get_report("inventory", date_range)

    def get_sales_report(self, date_range: DateRangeLike = None) -> Any:
        return self._get_report("sales", date_range)

    def get_maintenance_report(self, date_range: DateRangeLike = None) -> Any:
        return self._get_report("maintenance", date_range)

    def get_profit_report(self, date_range: DateRangeLike = None) -> Any:
        return self._get_report("profit", date_range)

    def get_report(self, kind: str, date_range: DateRangeLike = None) -> Any:
        """Dispatch by report name (inventory, sales, maintenance, profit)."""
        getters = {
            "inventory": self.get_inventory_report,
            "sales": self.get_sales_report,
            "maintenance": self.get_maintenance_report,
            "profit": self.get_profit_report,
        }
        if kind not in getters:
            raise ValueError(f"Unknown report '{kind}', expected one of: {', '.join(getters)}")
        return getters[kind](date_range)
