"""
Form Schemas and Validation

Pydantic models for the two form-driven flows (reservation and contact).
Field names are the ones posted by the site's HTML forms.

Free-text fields are trimmed and HTML-escaped during validation. The
escaped values are ``markupsafe.Markup`` instances, so Jinja2 autoescaping
in pages and emails keeps them as they are instead of escaping twice.

Author: El Sabor Web Team
Version: 1.0.0
"""

import logging
import re
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, TypeVar

from markupsafe import Markup, escape
from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from elsabor.core.exceptions import InvalidReservationSlot, InvalidSubmission

logger = logging.getLogger(__name__)

HORA_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"
PERSONAS_PATTERN = re.compile(r"[+-]?[0-9]+")
MENSAJE_MIN_LENGTH = 5
MENSAJE_MAX_LENGTH = 1000
PERSONAS_MIN = 1
PERSONAS_MAX = 50

FormT = TypeVar("FormT", bound=BaseModel)


def _neutralize(value: str) -> Markup:
    """Trim and HTML-escape a free-text field."""
    return escape(value.strip())


def _normalize_email(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class ReservationForm(BaseModel):
    """Table reservation request."""

    nombre: str = Field(..., examples=["Ana"])
    email: EmailStr = Field(..., examples=["ana@example.com"])
    fecha: str = Field(..., examples=["2026-10-21"])
    hora: str = Field(..., pattern=HORA_PATTERN, examples=["20:30"])
    personas: int = Field(..., strict=True, ge=PERSONAS_MIN, le=PERSONAS_MAX, examples=[4])
    peticiones: str = Field(default="", examples=["Mesa en la terraza"])

    @field_validator("nombre")
    @classmethod
    def validate_nombre(cls, v: str) -> str:
        cleaned = _neutralize(v)
        if not cleaned:
            raise ValueError("Name is required")
        return cleaned

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: Any) -> Any:
        return _normalize_email(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("fecha")
    @classmethod
    def validate_fecha(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Date is required")
        return v.strip()

    @field_validator("personas", mode="before")
    @classmethod
    def parse_personas(cls, v: Any) -> Any:
        # Whole numbers only: no decimals, padding or digit separators
        if isinstance(v, str):
            if not PERSONAS_PATTERN.fullmatch(v):
                raise ValueError("Party size must be a whole number")
            return int(v)
        return v

    @field_validator("peticiones")
    @classmethod
    def validate_peticiones(cls, v: str) -> str:
        return _neutralize(v)


class ContactForm(BaseModel):
    """Message sent through the contact page."""

    nombre: str = Field(..., examples=["Ana"])
    email: EmailStr = Field(..., examples=["ana@example.com"])
    mensaje: str = Field(..., examples=["¿Tenéis menú sin gluten?"])

    @field_validator("nombre")
    @classmethod
    def validate_nombre(cls, v: str) -> str:
        cleaned = _neutralize(v)
        if not cleaned:
            raise ValueError("Name is required")
        return cleaned

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: Any) -> Any:
        return _normalize_email(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("mensaje")
    @classmethod
    def validate_mensaje(cls, v: str) -> str:
        cleaned = _neutralize(v)
        if not MENSAJE_MIN_LENGTH <= len(cleaned) <= MENSAJE_MAX_LENGTH:
            raise ValueError(
                f"Message must be {MENSAJE_MIN_LENGTH}-{MENSAJE_MAX_LENGTH} characters"
            )
        return cleaned


# =============================================================================
# VALIDATION HELPERS
# =============================================================================

def parse_form(model: type[FormT], data: Mapping[str, Any]) -> FormT:
    """
    Validate submitted form data against ``model``.

    Raises:
        InvalidSubmission: On any rule violation. Field errors are only
            logged; the client gets the generic message.
    """
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        logger.info(f"Rejected {model.__name__}: {e.error_count()} invalid field(s)")
        logger.debug(f"Validation errors: {e.errors(include_input=False)}")
        raise InvalidSubmission() from e


def start_of_tomorrow(now: Optional[datetime] = None) -> datetime:
    """Midnight at the beginning of the day after ``now``."""
    now = now or datetime.now()
    return (now + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)


def reservation_slot(form: ReservationForm, now: Optional[datetime] = None) -> datetime:
    """
    Combine the reservation date and time into a single local datetime.

    Raises:
        InvalidReservationSlot: If the pair does not parse or is not
            strictly later than the start of tomorrow.
    """
    try:
        when = datetime.strptime(f"{form.fecha}T{form.hora}", "%Y-%m-%dT%H:%M")
    except ValueError as e:
        logger.info(f"Unparseable reservation slot: {form.fecha!r} {form.hora!r}")
        raise InvalidReservationSlot() from e

    if when <= start_of_tomorrow(now):
        logger.info(f"Reservation slot {when.isoformat()} is not after tomorrow 00:00")
        raise InvalidReservationSlot()

    return when


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    environment: str
    mail_transport: str
    timestamp: datetime
