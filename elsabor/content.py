"""
Content Store

Static, read-only datasets shown on the site: menu dishes, guest
testimonials and gallery photos. Built once per process and handed to
route handlers through ``Depends(get_content_store)``.
"""

from dataclasses import dataclass
from functools import lru_cache

from elsabor.core.config import get_settings


@dataclass(frozen=True)
class MenuItem:
    """A dish on the menu ("carta")."""
    nombre: str
    descripcion: str
    precio: float
    categoria: str
    imagen: str = ""

    @property
    def precio_formateado(self) -> str:
        return f"{self.precio:.2f} €"


@dataclass(frozen=True)
class Testimonial:
    """A guest review shown on the home page."""
    autor: str
    texto: str
    puntuacion: int = 5


@dataclass(frozen=True)
class ContentStore:
    platos: tuple[MenuItem, ...]
    testimonios: tuple[Testimonial, ...]
    fotos: tuple[str, ...]

    def platos_por_categoria(self) -> dict[str, list[MenuItem]]:
        """Menu grouped by category, keeping dataset order."""
        grouped: dict[str, list[MenuItem]] = {}
        for plato in self.platos:
            grouped.setdefault(plato.categoria, []).append(plato)
        return grouped


PLATOS: tuple[MenuItem, ...] = (
    MenuItem(
        nombre="Croquetas de jamón",
        descripcion="Croquetas caseras de jamón ibérico, cremosas por dentro.",
        precio=8.50,
        categoria="Entrantes",
        imagen="images/croquetas.jpg",
    ),
    MenuItem(
        nombre="Ensalada de temporada",
        descripcion="Verduras del mercado, queso de cabra y vinagreta de miel.",
        precio=9.00,
        categoria="Entrantes",
        imagen="images/ensalada.jpg",
    ),
    MenuItem(
        nombre="Paella valenciana",
        descripcion="Arroz con pollo, conejo y judía verde, para dos personas.",
        precio=32.00,
        categoria="Principales",
        imagen="images/paella.jpg",
    ),
    MenuItem(
        nombre="Lubina a la sal",
        descripcion="Lubina salvaje al horno con patatas panaderas.",
        precio=21.50,
        categoria="Principales",
        imagen="images/lubina.jpg",
    ),
    MenuItem(
        nombre="Presa ibérica",
        descripcion="A la brasa, con pimientos de Padrón.",
        precio=19.00,
        categoria="Principales",
        imagen="images/presa.jpg",
    ),
    MenuItem(
        nombre="Tarta de queso",
        descripcion="Tarta de queso al horno con frutos rojos.",
        precio=6.50,
        categoria="Postres",
        imagen="images/tarta.jpg",
    ),
    MenuItem(
        nombre="Crema catalana",
        descripcion="Crema tradicional con azúcar tostado.",
        precio=5.50,
        categoria="Postres",
        imagen="images/crema.jpg",
    ),
)

TESTIMONIOS: tuple[Testimonial, ...] = (
    Testimonial(
        autor="Lucía M.",
        texto="La mejor paella que he probado fuera de Valencia. Volveremos.",
    ),
    Testimonial(
        autor="James P.",
        texto="Friendly staff and a wonderful sea bass. Highly recommended.",
    ),
    Testimonial(
        autor="Carmen R.",
        texto="Ambiente acogedor y un servicio de diez.",
        puntuacion=4,
    ),
)


@lru_cache()
def get_content_store() -> ContentStore:
    """Process-wide content store."""
    return ContentStore(
        platos=PLATOS,
        testimonios=TESTIMONIOS,
        fotos=tuple(get_settings().gallery_photos_list),
    )
