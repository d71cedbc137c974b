"""
Unit tests for the DashboardClient endpoint methods.
"""

import json
from datetime import date

import pytest
import requests

from fleetdash.exceptions import HttpError
from fleetdash.models import DateRange

BASE = "https://fleet.example.com/api"


def _sent(http_session):
    args, kwargs = http_session.request.call_args
    body = kwargs.get("data")
    return args[0], args[1], json.loads(body) if body else None


@pytest.mark.unit
class TestAuthEndpoints:

    def test_login_persists_token(self, client, http_session, make_response, token_store):
        http_session.request.return_value = make_response(200, {"token": "t-1", "user": {"id": 1}})

        result = client.login({"username": "admin", "password": "secret"})

        assert result == {"token": "t-1", "user": {"id": 1}}
        assert _sent(http_session) == (
            "POST", f"{BASE}/auth/login", {"username": "admin", "password": "secret"}
        )
        assert token_store.get_token() == "t-1"

    def test_token_from_login_used_on_next_call(self, client, http_session, make_response):
        http_session.request.return_value = make_response(200, {"token": "t-2"})
        client.login({"username": "admin", "password": "secret"})

        http_session.request.return_value = make_response(200, {"total": 3})
        client.get_dashboard_summary()

        headers = http_session.request.call_args[1]["headers"]
        assert headers["Authorization"] == "Bearer t-2"

    def test_login_without_token_keeps_store_untouched(self, client, http_session, make_response, token_store):
        http_session.request.return_value = make_response(200, {"status": "mfa_required"})

        client.login({"username": "admin", "password": "secret"})

        assert token_store.get_token() is None

    def test_logout_clears_token(self, client, http_session, make_response, token_store):
        token_store.set_token("t-1")
        http_session.request.return_value = make_response(204, content_type=None)

        assert client.logout() is None

        assert _sent(http_session) == ("POST", f"{BASE}/auth/logout", None)
        assert token_store.get_token() is None

    def test_logout_clears_token_when_backend_fails(self, client, http_session, make_response, token_store):
        token_store.set_token("t-1")
        http_session.request.return_value = make_response(500, {"message": "boom"})

        client.logout()

        assert token_store.get_token() is None

    def test_logout_clears_token_when_backend_unreachable(self, client, http_session, token_store):
        token_store.set_token("t-1")
        http_session.request.side_effect = requests.ConnectionError("refused")

        client.logout()

        assert token_store.get_token() is None

    def test_token_accessors(self, client, token_store):
        client.set_token("abc")
        assert client.get_token() == "abc"
        assert token_store.get_token() == "abc"

        client.remove_token()
        assert client.get_token() is None


@pytest.mark.unit
class TestDashboardEndpoints:

    def test_summary(self, client, http_session):
        client.get_dashboard_summary()
        assert _sent(http_session) == ("GET", f"{BASE}/dashboard/summary", None)

    def test_top_sold_models(self, client, http_session):
        client.get_top_sold_models()
        assert _sent(http_session) == ("GET", f"{BASE}/dashboard/top-sold-models", None)


@pytest.mark.unit
class TestCarEndpoints:

    def test_get_cars_with_filter(self, client, http_session):
        client.get_cars({"make": "Honda"})
        assert _sent(http_session) == ("GET", f"{BASE}/cars?make=Honda", None)

    def test_get_cars_without_params_has_no_question_mark(self, client, http_session):
        client.get_cars({})
        assert _sent(http_session)[1] == f"{BASE}/cars"

        client.get_cars()
        assert _sent(http_session)[1] == f"{BASE}/cars"

    def test_get_cars_several_params(self, client, http_session):
        client.get_cars({"make": "Honda", "page": 2})
        assert _sent(http_session)[1] == f"{BASE}/cars?make=Honda&page=2"

    def test_get_car(self, client, http_session):
        client.get_car(5)
        assert _sent(http_session) == ("GET", f"{BASE}/cars/5", None)

    def test_car_id_is_quoted(self, client, http_session):
        client.get_car("a/b c")
        assert _sent(http_session)[1] == f"{BASE}/cars/a%2Fb%20c"

    def test_create_car(self, client, http_session):
        client.create_car({"make": "Toyota", "model": "Corolla"})
        assert _sent(http_session) == ("POST", f"{BASE}/cars", {"make": "Toyota", "model": "Corolla"})

    def test_update_car(self, client, http_session):
        client.update_car(5, {"price": 18000})
        assert _sent(http_session) == ("PUT", f"{BASE}/cars/5", {"price": 18000})

    def test_delete_car(self, client, http_session, make_response):
        http_session.request.return_value = make_response(204, content_type=None)

        assert client.delete_car(5) is None
        assert _sent(http_session) == ("DELETE", f"{BASE}/cars/5", None)


@pytest.mark.unit
class TestMaintenanceEndpoints:

    def test_records_for_car(self, client, http_session):
        client.get_maintenance_records(12)
        assert _sent(http_session) == ("GET", f"{BASE}/maintenance/car/12", None)

    def test_all_records(self, client, http_session):
        client.get_all_maintenance_records()
        assert _sent(http_session) == ("GET", f"{BASE}/maintenance", None)

    def test_single_record(self, client, http_session):
        client.get_maintenance_record(3)
        assert _sent(http_session) == ("GET", f"{BASE}/maintenance/3", None)

    def test_create_record(self, client, http_session):
        client.create_maintenance_record({"car_id": 12, "category": "oil"})
        assert _sent(http_session) == ("POST", f"{BASE}/maintenance", {"car_id": 12, "category": "oil"})

    def test_update_record(self, client, http_session):
        client.update_maintenance_record(3, {"cost": 80})
        assert _sent(http_session) == ("PUT", f"{BASE}/maintenance/3", {"cost": 80})

    def test_delete_record(self, client, http_session):
        client.delete_maintenance_record(3)
        assert _sent(http_session) == ("DELETE", f"{BASE}/maintenance/3", None)

    def test_categories(self, client, http_session):
        client.get_maintenance_categories()
        assert _sent(http_session) == ("GET", f"{BASE}/maintenance/categories", None)


@pytest.mark.unit
class TestReportEndpoints:

    @pytest.mark.parametrize(
        "method_name, kind",
        [
            ("get_inventory_report", "inventory"),
            ("get_sales_report", "sales"),
            ("get_maintenance_report", "maintenance"),
            ("get_profit_report", "profit"),
        ],
    )
    def test_full_range(self, client, http_session, method_name, kind):
        getattr(client, method_name)({"start": "2024-01-01", "end": "2024-03-31"})

        assert _sent(http_session)[1] == (
            f"{BASE}/reports/{kind}?start_date=2024-01-01&end_date=2024-03-31"
        )

    def test_empty_range_omits_parameters(self, client, http_session):
        client.get_sales_report({})
        assert _sent(http_session)[1] == f"{BASE}/reports/sales"

    def test_no_range(self, client, http_session):
        client.get_profit_report()
        assert _sent(http_session)[1] == f"{BASE}/reports/profit"

    def test_start_only(self, client, http_session):
        client.get_inventory_report({"start": "2024-01-01"})
        assert _sent(http_session)[1] == f"{BASE}/reports/inventory?start_date=2024-01-01"

    def test_end_only(self, client, http_session):
        client.get_maintenance_report({"end": "2024-06-30"})
        assert _sent(http_session)[1] == f"{BASE}/reports/maintenance?end_date=2024-06-30"

    def test_date_range_object_with_dates(self, client, http_session):
        client.get_profit_report(DateRange(start=date(2024, 1, 1), end=date(2024, 12, 31)))
        assert _sent(http_session)[1] == (
            f"{BASE}/reports/profit?start_date=2024-01-01&end_date=2024-12-31"
        )

    def test_get_report_dispatches_by_kind(self, client, http_session):
        client.get_report("inventory", {"start": "2024-05-01"})
        assert _sent(http_session)[1] == f"{BASE}/reports/inventory?start_date=2024-05-01"

    def test_get_report_rejects_unknown_kind(self, client):
        with pytest.raises(ValueError, match="Unknown report"):
            client.get_report("fuel")

    def test_report_errors_propagate(self, client, http_session, make_response):
        http_session.request.return_value = make_response(502, {})

        with pytest.raises(HttpError, match="HTTP 502: Bad Gateway"):
            client.get_sales_report()
