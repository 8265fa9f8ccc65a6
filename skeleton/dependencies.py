"""FastAPI dependencies resolving collaborators stored on ``app.state``."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fastapi import Request
from fastapi.templating import Jinja2Templates

from skeleton.config import Settings
from skeleton.services.database import DatabaseProbe
from skeleton.services.mailer import Mailer


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> DatabaseProbe:
    return request.app.state.database


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def get_clock(request: Request) -> Callable[[], datetime]:
    return request.app.state.clock
