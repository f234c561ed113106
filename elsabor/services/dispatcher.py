"""
Notification Dispatcher

Composes and sends the two emails of a successful form submission:
one to the restaurant's mailbox, then one acknowledging receipt to the
visitor.

Delivery contract:
    - Messages go out one after the other, operator first.
    - Each message is sent at most once; there are no retries.
    - The first failure stops the dispatch and raises DispatchError. A
      message already delivered is not recalled.

Author: El Sabor Web Team
Version: 1.0.0
"""

import logging
from datetime import datetime
from email.utils import formataddr
from typing import Any, Optional, Sequence

from elsabor.core.config import Settings, get_settings
from elsabor.core.exceptions import DispatchError
from elsabor.i18n import default_language, format_date_time, load_locale
from elsabor.rendering import render_email
from elsabor.schemas import ContactForm, ReservationForm
from elsabor.services.notifications import (
    BaseMailTransport,
    NotificationResult,
    OutboundMessage,
    get_mail_transport,
)

logger = logging.getLogger(__name__)

RESERVATION_ERROR = "Error al enviar la reserva."
CONTACT_ERROR = "Error al enviar el mensaje."


class NotificationDispatcher:
    """Builds and sends the operator/visitor email pair."""

    def __init__(self, transport: BaseMailTransport, settings: Optional[Settings] = None):
        self.transport = transport
        self.settings = settings or get_settings()

    def _sender(self, label: str) -> str:
        return formataddr((label, self.settings.email_user))

    @property
    def _restaurant_sender(self) -> str:
        return self._sender(f"Restaurante {self.settings.restaurant_name}")

    # =========================================================================
    # MESSAGE COMPOSITION
    # =========================================================================

    def build_reservation_messages(
        self,
        form: ReservationForm,
        when: datetime,
        translations: dict[str, Any],
    ) -> tuple[OutboundMessage, OutboundMessage]:
        """Operator notice and visitor acknowledgement for a reservation."""
        operator_t = load_locale(default_language())
        common = {
            "nombre": form.nombre,
            "email": form.email,
            "personas": form.personas,
        }

        to_restaurant = OutboundMessage(
            sender=self._sender(f"Reservas {self.settings.restaurant_name}"),
            recipient=self.settings.email_user,
            subject=f"Nueva reserva de {form.nombre}",
            body_html=render_email(
                "reserva_restaurante.html",
                fecha_hora=format_date_time(when, operator_t),
                peticiones=form.peticiones or operator_t["ninguna"],
                **common,
            ),
        )

        to_customer = OutboundMessage(
            sender=self._restaurant_sender,
            recipient=form.email,
            subject=translations["email_reserva_asunto"],
            body_html=render_email(
                "reserva_cliente.html",
                t=translations,
                fecha_hora=format_date_time(when, translations),
                peticiones=form.peticiones or translations["ninguna"],
                **common,
            ),
        )

        return to_restaurant, to_customer

    def build_contact_messages(
        self,
        form: ContactForm,
        translations: dict[str, Any],
    ) -> tuple[OutboundMessage, OutboundMessage]:
        """Operator notice and visitor acknowledgement for a contact message."""
        to_restaurant = OutboundMessage(
            sender=self._sender("Contacto Web Restaurante"),
            recipient=self.settings.email_user,
            subject=f"Mensaje de {form.nombre}",
            body_html=render_email(
                "contacto_restaurante.html",
                nombre=form.nombre,
                email=form.email,
                mensaje=form.mensaje,
            ),
        )

        to_customer = OutboundMessage(
            sender=self._restaurant_sender,
            recipient=form.email,
            subject=translations["email_contacto_asunto"],
            body_html=render_email(
                "contacto_cliente.html",
                t=translations,
                nombre=form.nombre,
                mensaje=form.mensaje,
            ),
        )

        return to_restaurant, to_customer

    # =========================================================================
    # DELIVERY
    # =========================================================================

    async def dispatch(
        self,
        messages: Sequence[OutboundMessage],
        error_message: str = CONTACT_ERROR,
    ) -> list[NotificationResult]:
        """
        Send ``messages`` in order, stopping at the first failure.

        Raises:
            DispatchError: If a send reports failure or raises.
        """
        results = []

        for message in messages:
            try:
                result = await self.transport.send(message)
            except Exception as e:
                logger.exception(f"Error sending email to {message.recipient}: {e}")
                raise DispatchError(error_message) from e

            if not result.success:
                logger.error(
                    f"Email to {message.recipient} failed "
                    f"({result.provider}): {result.error_message}"
                )
                raise DispatchError(error_message)

            results.append(result)

        return results

    async def send_reservation(
        self,
        form: ReservationForm,
        when: datetime,
        translations: dict[str, Any],
    ) -> list[NotificationResult]:
        messages = self.build_reservation_messages(form, when, translations)
        results = await self.dispatch(messages, RESERVATION_ERROR)
        logger.info(f"Reservation for {when:%Y-%m-%d %H:%M} ({form.personas} people) dispatched")
        return results

    async def send_contact(
        self,
        form: ContactForm,
        translations: dict[str, Any],
    ) -> list[NotificationResult]:
        messages = self.build_contact_messages(form, translations)
        results = await self.dispatch(messages, CONTACT_ERROR)
        logger.info("Contact message dispatched")
        return results


def get_dispatcher() -> NotificationDispatcher:
    """Dispatcher bound to the configured mail transport."""
    return NotificationDispatcher(get_mail_transport())
