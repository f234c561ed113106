"""
Site Exceptions

Every failure a visitor can trigger maps to one of these. Each carries the
HTTP status and the plain-text body returned to the client; nothing more
specific is ever exposed.
"""

from typing import Optional


class SiteError(Exception):
    """Base class for errors turned into a plain-text HTTP response."""

    status_code: int = 500
    public_message: str = "Error interno del servidor."

    def __init__(self, public_message: Optional[str] = None):
        if public_message is not None:
            self.public_message = public_message
        super().__init__(self.public_message)


class UnsupportedLanguage(SiteError):
    """Language prefix outside the supported set."""

    status_code = 404
    public_message = "Idioma no soportado"

    def __init__(self, lang: str):
        self.lang = lang
        super().__init__()


class InvalidSubmission(SiteError):
    """A submitted form broke at least one field rule."""

    status_code = 400
    public_message = "Datos inválidos."


class InvalidReservationSlot(InvalidSubmission):
    """Reservation date/time unparseable or not after the start of tomorrow."""

    public_message = "Fecha y hora inválidas o anteriores a mañana."


class DispatchError(SiteError):
    """One of the two notification emails could not be sent."""

    status_code = 500
    public_message = "Error al enviar el mensaje."
