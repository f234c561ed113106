"""
Site Routes

One route table, mounted twice by the application: once without prefix
(Spanish, the default language) and once under ``/{lang}``. The language
dependency runs before anything else, so an unsupported prefix ends the
request with a 404 before any form is read.

Pages:
    - GET  /          Home with testimonials
    - GET  /carta     Menu
    - GET  /reserva   Reservation form
    - POST /reserva   Reservation submission
    - GET  /contacto  Contact form
    - POST /contacto  Contact submission
    - GET  /galeria   Photo gallery
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from elsabor.content import ContentStore, get_content_store
from elsabor.core.exceptions import UnsupportedLanguage
from elsabor.i18n import default_language, format_long_date, is_supported, load_locale
from elsabor.rendering import interpolate, page_context, render
from elsabor.schemas import ContactForm, ReservationForm, parse_form, reservation_slot, start_of_tomorrow
from elsabor.services.dispatcher import NotificationDispatcher, get_dispatcher

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=HTMLResponse)


@dataclass
class Locale:
    """Language resolved for the current request."""
    lang: str
    translations: dict[str, Any]


def get_locale(request: Request) -> Locale:
    """
    Resolve the request language from the optional ``lang`` path segment.

    A path such as ``/carta/`` lands on the prefixed home page with
    ``lang="carta"``; it is redirected to the unprefixed page instead.

    Raises:
        UnsupportedLanguage: If the prefix is not a supported language.
    """
    lang = request.path_params.get("lang")
    if lang is None:
        lang = default_language()
    elif not is_supported(lang):
        if request.url.path == f"/{lang}/" and f"/{lang}" in _page_paths():
            location = f"/{lang}"
            if request.url.query:
                location = f"{location}?{request.url.query}"
            raise HTTPException(status_code=307, headers={"Location": location})
        logger.info(f"Unsupported language prefix: {lang!r}")
        raise UnsupportedLanguage(lang)

    return Locale(lang=lang, translations=load_locale(lang))


def _page_paths() -> set[str]:
    return {route.path for route in router.routes if route.path != "/"}


# =============================================================================
# CONTENT PAGES
# =============================================================================

@router.get("/", name="home")
async def home(
    request: Request,
    locale: Locale = Depends(get_locale),
    content: ContentStore = Depends(get_content_store),
):
    context = page_context(
        locale.translations, locale.lang, "",
        testimonios=content.testimonios,
    )
    return render(request, "home.html", context)


@router.get("/carta", name="carta")
async def carta(
    request: Request,
    locale: Locale = Depends(get_locale),
    content: ContentStore = Depends(get_content_store),
):
    context = page_context(
        locale.translations, locale.lang, "carta",
        description_key="descripcion_carta",
        default_description="Carta de platos.",
        categorias=content.platos_por_categoria(),
    )
    return render(request, "carta.html", context)


@router.get("/galeria", name="galeria")
async def galeria(
    request: Request,
    locale: Locale = Depends(get_locale),
    content: ContentStore = Depends(get_content_store),
):
    context = page_context(
        locale.translations, locale.lang, "galeria",
        description_key="descripcion_galeria",
        default_description="Galería de fotos.",
        fotos=content.fotos,
    )
    return render(request, "galeria.html", context)


# =============================================================================
# RESERVATIONS
# =============================================================================

@router.get("/reserva", name="reserva")
async def reserva_form(
    request: Request,
    locale: Locale = Depends(get_locale),
):
    context = page_context(
        locale.translations, locale.lang, "reserva",
        description_key="descripcion_reserva",
        default_description="Reserva tu mesa.",
        fecha_minima=start_of_tomorrow().date().isoformat(),
    )
    return render(request, "reserva.html", context)


@router.post("/reserva", name="reserva_submit")
async def reserva_submit(
    request: Request,
    locale: Locale = Depends(get_locale),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    form = parse_form(ReservationForm, await request.form())
    when = reservation_slot(form)

    await dispatcher.send_reservation(form, when, locale.translations)

    t = locale.translations
    fecha_formateada = format_long_date(when, t)
    context = page_context(
        t, locale.lang, "reserva",
        nombre=form.nombre,
        personas=form.personas,
        fecha_formateada=fecha_formateada,
    )
    context["title"] = t.get("reserva_confirmada_titulo", "Reserva Confirmada")
    context["description"] = interpolate(
        t.get("reserva_confirmada_descripcion", "Reserva recibida para {nombre} el día {fecha}."),
        nombre=form.nombre,
        fecha=fecha_formateada,
    )
    return render(request, "reserva_confirmacion.html", context)


# =============================================================================
# CONTACT
# =============================================================================

@router.get("/contacto", name="contacto")
async def contacto_form(
    request: Request,
    locale: Locale = Depends(get_locale),
):
    context = page_context(
        locale.translations, locale.lang, "contacto",
        description_key="descripcion_contacto",
        default_description="Contáctanos.",
    )
    return render(request, "contacto.html", context)


@router.post("/contacto", name="contacto_submit")
async def contacto_submit(
    request: Request,
    locale: Locale = Depends(get_locale),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    form = parse_form(ContactForm, await request.form())

    await dispatcher.send_contact(form, locale.translations)

    t = locale.translations
    context = page_context(
        t, locale.lang, "contacto",
        description_key="contacto_confirmado_descripcion",
        default_description="Tu mensaje ha sido enviado correctamente.",
        nombre=form.nombre,
    )
    context["title"] = t.get("contacto_confirmado_titulo", "Mensaje Enviado")
    return render(request, "contacto_confirmacion.html", context)
