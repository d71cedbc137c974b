"""CLI commands."""

from .auth import login, logout
from .config import config_group
from .inventory import cars, maintenance, summary, top_models
from .reports import report

__all__ = [
    "login",
    "logout",
    "summary",
    "top_models",
    "cars",
    "maintenance",
    "report",
    "config_group",
]
