"""Named item catalogues an invoice can be wired with.

Each catalogue is a factory, so every unit of work gets its own items.
"""

from collections.abc import Callable

from billing.invoice.invoice import Item


def default_items() -> list[Item]:
    return [
        Item.of("Camara Sony", 800, 2),
        Item.of("Bicicleta Bianchi 26", 1200, 4),
    ]


def office_items() -> list[Item]:
    return [
        Item.of("Monitor Asus 24", 700, 4),
        Item.of("Notebook Razer", 2400, 6),
        Item.of("Impresora HP", 800, 1),
        Item.of("Escritorio Oficina", 900, 4),
    ]


_CATALOGUES: dict[str, Callable[[], list[Item]]] = {
    "default": default_items,
    "office": office_items,
}


def available_qualifiers() -> list[str]:
    return sorted(_CATALOGUES)


def items_for(qualifier: str) -> list[Item]:
    """Return fresh items for the named catalogue."""
    try:
        factory = _CATALOGUES[qualifier]
    except KeyError:
        raise ValueError(f"Unknown item catalogue: {qualifier}") from None
    return factory()
