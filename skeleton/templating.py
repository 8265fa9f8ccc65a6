"""Jinja2 view rendering."""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def build_templates(directory: str | Path = TEMPLATES_DIR) -> Jinja2Templates:
    return Jinja2Templates(directory=str(directory))
