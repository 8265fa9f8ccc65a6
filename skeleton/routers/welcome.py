"""Welcome page."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from skeleton.config import Settings
from skeleton.dependencies import get_app_settings, get_templates

router = APIRouter(tags=["welcome"])


@router.get("/", response_class=HTMLResponse)
async def welcome(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    """Render the welcome view."""
    return templates.TemplateResponse(
        request,
        "welcome.html",
        {
            "app_name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
        },
    )
