"""
Page Renderer

Jinja2 templates for pages and email bodies. Autoescaping is on for
both; locale strings with ``{placeholders}`` go through the
``interpolate`` filter so only the interpolated values are escaped.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from markupsafe import Markup, escape
from starlette.responses import Response

from elsabor.core.config import get_settings
from elsabor.i18n import lang_path

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def interpolate(text: str, **values: Any) -> Markup:
    """Fill ``{name}`` placeholders in a display string, escaping the values."""
    return escape(text).format(**values)


templates.env.filters["interpolate"] = interpolate


def page_context(
    translations: dict[str, Any],
    lang: str,
    page: str,
    description_key: Optional[str] = None,
    default_description: str = "",
    **extra: Any,
) -> dict[str, Any]:
    """
    Build the data bag shared by every page.

    Args:
        translations: Locale dictionary for the request
        lang: Resolved language code
        page: Navigation key of the page ("" for home)
        description_key: Locale key of the meta description
        default_description: Used when the locale lacks ``description_key``
        **extra: Page-specific values
    """
    settings = get_settings()
    context = {
        "title": translations.get("titulo", settings.restaurant_name),
        "description": translations.get(description_key or "descripcion", default_description),
        "page": page,
        "is_home": page == "",
        "lang": lang,
        "lang_path": lang_path(lang),
        "t": translations,
        "restaurant_name": settings.restaurant_name,
        "year": date.today().year,
    }
    context.update(extra)
    return context


def render(
    request: Request,
    template: str,
    context: dict[str, Any],
    status_code: int = 200,
) -> Response:
    """Render a page template into an HTML response."""
    logger.debug(f"Rendering {template} ({context.get('lang')})")
    return templates.TemplateResponse(request, template, context, status_code=status_code)


def render_email(template: str, **context: Any) -> str:
    """Render an email body template to an HTML string."""
    return templates.get_template(f"emails/{template}").render(**context)
