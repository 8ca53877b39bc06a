"""Invoice lifecycle — build, initialize and tear down per unit of work.

``build_invoice`` wires a fresh Client and Invoice and runs the
post-construction step exactly once. ``invoice_scope`` wraps that in a
context manager whose exit always runs the teardown step.

Both expect an initialized ``billing`` domain with an active domain context.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import structlog

from billing.config import InvoiceSettings, get_settings
from billing.invoice.catalogue import items_for
from billing.invoice.invoice import Client, Invoice, Item

logger = structlog.get_logger(__name__)


def build_invoice(settings: InvoiceSettings, items: Iterable[Item]) -> Invoice:
    """Return a wired, initialized invoice built from ``settings`` and ``items``."""
    client = Client(name=settings.client_name, lastname=settings.client_lastname)
    invoice = Invoice(description=settings.description_template)

    invoice.wire(client, items)
    invoice.initialize()
    return invoice


@contextmanager
def invoice_scope(
    settings: InvoiceSettings | None = None,
    items: Iterable[Item] | None = None,
) -> Iterator[Invoice]:
    """Yield an invoice for one unit of work and destroy it on exit."""
    settings = settings or get_settings()
    if items is None:
        items = items_for(settings.items_qualifier)

    invoice = build_invoice(settings, items)
    logger.debug("Opened invoice scope", invoice_id=str(invoice.id))
    try:
        yield invoice
    finally:
        invoice.destroy()
        logger.debug("Closed invoice scope", invoice_id=str(invoice.id))
