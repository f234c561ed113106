from __future__ import annotations

import dataclasses

import pytest

from elsabor.content import ContentStore, MenuItem, get_content_store


def test_store_is_process_wide():
    assert get_content_store() is get_content_store()


def test_store_has_content():
    store = get_content_store()
    assert len(store.platos) > 0
    assert len(store.testimonios) > 0
    assert store.fotos == ("images/foto1.jpg", "images/foto2.jpg")


def test_records_are_immutable():
    store = get_content_store()
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.platos[0].precio = 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.platos = ()


def test_grouping_keeps_order():
    store = ContentStore(
        platos=(
            MenuItem("A", "", 1.0, "Postres"),
            MenuItem("B", "", 2.0, "Entrantes"),
            MenuItem("C", "", 3.0, "Postres"),
        ),
        testimonios=(),
        fotos=(),
    )
    grouped = store.platos_por_categoria()
    assert list(grouped) == ["Postres", "Entrantes"]
    assert [p.nombre for p in grouped["Postres"]] == ["A", "C"]


def test_price_format():
    assert MenuItem("Paella", "", 32.0, "Principales").precio_formateado == "32.00 €"
