"""Business services: the dashboard API client."""

from .api_client import DashboardClient, build_query, with_query

__all__ = ["DashboardClient", "build_query", "with_query"]
