"""Domain events for the Invoice aggregate.

One event per lifecycle transition: wired, initialized, destroyed.
"""

from protean.fields import DateTime, Identifier, Integer, String, Text

from billing.domain import billing


@billing.event(part_of="Invoice")
class InvoiceWired:
    """A client and an item sequence were assigned to the invoice."""

    __version__ = "v1"

    invoice_id = Identifier(required=True)
    client_name = String(max_length=255)
    client_lastname = String(max_length=255)
    item_count = Integer(default=0)
    wired_at = DateTime(required=True)


@billing.event(part_of="Invoice")
class InvoiceInitialized:
    """The post-construction step ran and rewrote the description."""

    __version__ = "v1"

    invoice_id = Identifier(required=True)
    description = Text(required=True)
    client_name = String(max_length=255)
    initialized_at = DateTime(required=True)


@billing.event(part_of="Invoice")
class InvoiceDestroyed:
    """The invoice reached the end of its unit of work."""

    __version__ = "v1"

    invoice_id = Identifier(required=True)
    destroyed_at = DateTime(required=True)
