from __future__ import annotations

from datetime import datetime

import pytest
from markupsafe import Markup

from elsabor.core.exceptions import InvalidReservationSlot, InvalidSubmission
from elsabor.schemas import (
    ContactForm,
    ReservationForm,
    parse_form,
    reservation_slot,
    start_of_tomorrow,
)

NOW = datetime(2026, 10, 19, 15, 30)


def _reserva(**overrides):
    data = {
        "nombre": "Ana",
        "email": "ana@example.com",
        "fecha": "2026-10-21",
        "hora": "20:30",
        "personas": "4",
    }
    data.update(overrides)
    return data


def _contacto(**overrides):
    data = {"nombre": "Ana", "email": "ana@example.com", "mensaje": "Hola, ¿abrís el lunes?"}
    data.update(overrides)
    return data


# ── Reservation fields ───────────────────────────────────────────────────


class TestReservationForm:
    def test_valid_submission(self):
        form = parse_form(ReservationForm, _reserva())
        assert form.nombre == "Ana"
        assert form.personas == 4
        assert form.peticiones == ""

    def test_name_is_trimmed_and_escaped(self):
        form = parse_form(ReservationForm, _reserva(nombre="  <script>x</script> "))
        assert form.nombre == "&lt;script&gt;x&lt;/script&gt;"
        assert isinstance(form.nombre, Markup)

    @pytest.mark.parametrize("nombre", ["", "   "])
    def test_blank_name_rejected(self, nombre):
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, _reserva(nombre=nombre))

    def test_missing_field_rejected(self):
        data = _reserva()
        del data["email"]
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, data)

    @pytest.mark.parametrize("email", ["ana", "ana@", "@example.com", "ana example@x.com"])
    def test_bad_email_rejected(self, email):
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, _reserva(email=email))

    def test_email_normalized(self):
        form = parse_form(ReservationForm, _reserva(email="  Ana.Garcia@Example.COM "))
        assert form.email == "ana.garcia@example.com"

    def test_blank_date_rejected(self):
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, _reserva(fecha="  "))

    @pytest.mark.parametrize("hora", ["00:00", "09:05", "19:59", "23:59"])
    def test_valid_times(self, hora):
        assert parse_form(ReservationForm, _reserva(hora=hora)).hora == hora

    @pytest.mark.parametrize("hora", ["24:00", "9:30", "12:60", "12:3", "1230", "12:30:00", ""])
    def test_invalid_times(self, hora):
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, _reserva(hora=hora))

    @pytest.mark.parametrize("personas", ["1", "50"])
    def test_party_size_bounds_accepted(self, personas):
        assert parse_form(ReservationForm, _reserva(personas=personas)).personas == int(personas)

    @pytest.mark.parametrize("personas", ["0", "51", "-3", "cuatro", ""])
    def test_party_size_out_of_range(self, personas):
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, _reserva(personas=personas))

    @pytest.mark.parametrize("personas", ["4.0", " 4 ", "1_0", "4e1", "４"])
    def test_party_size_must_be_plain_digits(self, personas):
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, _reserva(personas=personas))

    def test_party_size_plus_sign_accepted(self):
        assert parse_form(ReservationForm, _reserva(personas="+4")).personas == 4

    def test_party_size_float_rejected(self):
        with pytest.raises(InvalidSubmission):
            parse_form(ReservationForm, _reserva(personas=4.0))

    def test_special_requests_escaped(self):
        form = parse_form(ReservationForm, _reserva(peticiones=" Trona & <b>terraza</b> "))
        assert form.peticiones == "Trona &amp; &lt;b&gt;terraza&lt;/b&gt;"

    def test_unknown_fields_ignored(self):
        form = parse_form(ReservationForm, _reserva(newsletter="on"))
        assert not hasattr(form, "newsletter")


# ── Contact fields ───────────────────────────────────────────────────────


class TestContactForm:
    def test_valid_submission(self):
        form = parse_form(ContactForm, _contacto())
        assert form.mensaje == "Hola, ¿abrís el lunes?"

    @pytest.mark.parametrize("length", [5, 1000])
    def test_message_length_bounds_accepted(self, length):
        form = parse_form(ContactForm, _contacto(mensaje="a" * length))
        assert len(form.mensaje) == length

    @pytest.mark.parametrize("mensaje", ["a" * 4, "a" * 1001, "", "   abcd   "])
    def test_message_length_out_of_range(self, mensaje):
        with pytest.raises(InvalidSubmission):
            parse_form(ContactForm, _contacto(mensaje=mensaje))

    def test_length_measured_after_escaping(self):
        # "<b>" becomes "&lt;b&gt;" (9 characters)
        form = parse_form(ContactForm, _contacto(mensaje="<b>"))
        assert form.mensaje == "&lt;b&gt;"

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidSubmission):
            parse_form(ContactForm, _contacto(nombre=" "))


# ── Reservation slot ─────────────────────────────────────────────────────


class TestReservationSlot:
    def _form(self, fecha, hora):
        return ReservationForm(
            nombre="Ana", email="ana@example.com", fecha=fecha, hora=hora, personas=2
        )

    def test_start_of_tomorrow(self):
        assert start_of_tomorrow(NOW) == datetime(2026, 10, 20, 0, 0)

    def test_start_of_tomorrow_across_month(self):
        assert start_of_tomorrow(datetime(2026, 10, 31, 23, 59)) == datetime(2026, 11, 1)

    def test_combines_date_and_time(self):
        assert reservation_slot(self._form("2026-10-21", "20:30"), now=NOW) == datetime(
            2026, 10, 21, 20, 30
        )

    def test_tomorrow_midnight_rejected(self):
        with pytest.raises(InvalidReservationSlot):
            reservation_slot(self._form("2026-10-20", "00:00"), now=NOW)

    def test_tomorrow_after_midnight_accepted(self):
        assert reservation_slot(self._form("2026-10-20", "00:01"), now=NOW) == datetime(
            2026, 10, 20, 0, 1
        )

    @pytest.mark.parametrize("fecha", ["2026-10-19", "2026-10-18", "2025-12-25"])
    def test_today_and_past_rejected(self, fecha):
        with pytest.raises(InvalidReservationSlot):
            reservation_slot(self._form(fecha, "21:00"), now=NOW)

    @pytest.mark.parametrize("fecha", ["mañana", "2026-13-01", "2026-02-30", "21/10/2026"])
    def test_unparseable_date_rejected(self, fecha):
        with pytest.raises(InvalidReservationSlot):
            reservation_slot(self._form(fecha, "21:00"), now=NOW)

    def test_slot_error_is_a_bad_request(self):
        assert InvalidReservationSlot.status_code == 400
        assert issubclass(InvalidReservationSlot, InvalidSubmission)
